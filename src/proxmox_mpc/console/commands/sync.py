"""Sync command - synchronize infrastructure state for the workspace."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from proxmox_mpc.console.commands.base import require_workspace

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession
    from proxmox_mpc.workspace import ProjectWorkspace


class SyncService(Protocol):
    """Imports server state into the workspace."""

    def sync(self, workspace: "ProjectWorkspace") -> None:
        ...


class UnavailableSyncService:
    """Sync service used when no server client is configured."""

    def sync(self, workspace: "ProjectWorkspace") -> None:
        print(f"🚧 Infrastructure sync not yet implemented for {workspace.name}")
        print(f"   This will import VMs and containers from {workspace.config.host} "
              f"(node {workspace.config.node})")


def register(registry: "CommandRegistry", service: Optional[SyncService] = None) -> None:
    sync_service = service or UnavailableSyncService()

    @registry.command("sync", "Sync infrastructure state")
    def cmd_sync(args: list[str], session: "ConsoleSession"):
        """Import existing VMs and containers from the workspace's server."""
        workspace = require_workspace(session, "sync")
        print("🔄 Synchronizing Proxmox infrastructure...\n")
        sync_service.sync(workspace)
        print()

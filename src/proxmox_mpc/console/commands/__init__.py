"""
Built-in slash commands.

Each module exposes ``register(registry)``; register_builtins() installs
them in the order they are listed by /help.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from proxmox_mpc.console.commands import exit, help, history, init, status, sync

if TYPE_CHECKING:
    from proxmox_mpc.console.commands.sync import SyncService
    from proxmox_mpc.console.registry import CommandRegistry

# Names every console registry starts with
BUILTIN_COMMANDS = ["help", "init", "status", "sync", "history", "exit", "quit"]


def register_builtins(registry: "CommandRegistry", sync_service: Optional["SyncService"] = None) -> None:
    """Register the built-in slash commands."""
    help.register(registry)
    init.register(registry)
    status.register(registry)
    sync.register(registry, sync_service)
    history.register(registry)
    exit.register(registry)


__all__ = ["BUILTIN_COMMANDS", "register_builtins"]

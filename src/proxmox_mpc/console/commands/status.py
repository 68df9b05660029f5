"""Status command - show workspace and session information."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession


def cmd_status(args: list[str], session: "ConsoleSession"):
    """Show workspace and session status."""
    print("📊 Project Status\n")

    ws = session.workspace
    if ws is not None:
        print("📁 Workspace Information:")
        print(f"   Project: {ws.name}")
        print(f"   Location: {ws.root_path}")
        print(f"   Config: {ws.config_path}")
        print("\n🖥️  Server Configuration:")
        print(f"   Host: {ws.config.host}:{ws.config.port}")
        print(f"   Username: {ws.config.username}")
        print(f"   Node: {ws.config.node}")
        print(f"   SSL Verification: {'Enabled' if ws.config.reject_unauthorized else 'Disabled'}")
    else:
        print("📁 No workspace detected")
        print("   Use /init to create a new workspace")
        print("   or start the console in an existing project directory")

    print("\n⏱️  Session:")
    print(f"   Commands entered: {len(session.history)}")
    print(f"   Elapsed: {session.elapsed_seconds()}s")
    print(f"   Working dir: {session.cwd}\n")


def register(registry: "CommandRegistry") -> None:
    registry.register("status", cmd_status, "Show project and session status")

"""Exit command - leave the console."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession


def cmd_exit(args: list[str], session: "ConsoleSession") -> bool:
    """Exit the console."""
    return True  # Signal to exit; the console prints the goodbye


def register(registry: "CommandRegistry") -> None:
    registry.register("exit", cmd_exit, "Exit the console")
    registry.register("quit", cmd_exit, "Exit the console")

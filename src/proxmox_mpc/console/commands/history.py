"""History command - show lines entered in this session."""
from __future__ import annotations

from typing import TYPE_CHECKING

from proxmox_mpc.core.exceptions import CommandUsageError

if TYPE_CHECKING:
    from proxmox_mpc.console.registry import CommandRegistry
    from proxmox_mpc.console.session import ConsoleSession


def cmd_history(args: list[str], session: "ConsoleSession"):
    """Show session history.

    Usage:
        /history     - Show every line entered
        /history 10  - Show the last 10 lines
    """
    entries = list(enumerate(session.history, 1))
    if args:
        try:
            count = int(args[0])
        except ValueError:
            raise CommandUsageError(f"Expected a number, got '{args[0]}'") from None
        if count < 1:
            raise CommandUsageError("Count must be at least 1")
        entries = entries[-count:]

    print()
    for idx, line in entries:
        print(f"  {idx:>4}  {line}")
    print()


def register(registry: "CommandRegistry") -> None:
    registry.register("history", cmd_history, "Show session history", usage="/history [n]")

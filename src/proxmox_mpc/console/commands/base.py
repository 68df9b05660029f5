"""Helpers shared by built-in commands."""
from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, NoReturn

from proxmox_mpc.core.exceptions import CommandUsageError, WorkspaceRequiredError

if TYPE_CHECKING:
    from proxmox_mpc.console.session import ConsoleSession
    from proxmox_mpc.workspace import ProjectWorkspace


class CommandArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CommandUsageError instead of exiting."""

    def __init__(self, prog: str, **kwargs):
        kwargs.setdefault("add_help", False)
        super().__init__(prog=prog, **kwargs)

    def error(self, message: str) -> NoReturn:
        raise CommandUsageError(f"{message}. Usage: {self.format_usage().strip()}")

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        raise CommandUsageError(message.strip() if message else f"{self.prog} exited")


def require_workspace(session: "ConsoleSession", command: str) -> "ProjectWorkspace":
    """Return the session workspace or raise WorkspaceRequiredError."""
    if session.workspace is None:
        raise WorkspaceRequiredError(command)
    return session.workspace

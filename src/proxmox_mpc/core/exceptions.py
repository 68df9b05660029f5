"""
Exception classes for the interactive console.
"""

from __future__ import annotations


class ConsoleError(Exception):
    """Base exception for console errors."""


class UnknownCommandError(ConsoleError):
    """Slash command not found in registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: /{name}")
        self.name = name


class HandlerExecutionError(ConsoleError):
    """A resolved command handler failed.

    The message is the handler's own message; the original exception is
    kept as ``__cause__``.
    """

    def __init__(self, command: str, error: BaseException):
        super().__init__(str(error) or type(error).__name__)
        self.command = command
        self.__cause__ = error


class DetectionError(ConsoleError):
    """Workspace detection failed."""


class StreamClosedSignal(ConsoleError):
    """Input stream closed. Not an error, the loop treats it as end of input."""


class WorkspaceRequiredError(ConsoleError):
    """Command needs an initialized workspace."""

    def __init__(self, command: str):
        super().__init__(
            f"Command '{command}' requires an initialized workspace. Run /init first."
        )
        self.command = command


class WorkspaceAlreadyAttachedError(ConsoleError):
    """Session already holds a workspace."""


class CommandUsageError(ConsoleError):
    """Invalid arguments passed to a slash command."""

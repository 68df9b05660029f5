"""
Core building blocks shared by the console and the CLI.
"""

from proxmox_mpc.core.exceptions import (
    CommandUsageError,
    ConsoleError,
    DetectionError,
    HandlerExecutionError,
    StreamClosedSignal,
    UnknownCommandError,
    WorkspaceAlreadyAttachedError,
    WorkspaceRequiredError,
)

__all__ = [
    "CommandUsageError",
    "ConsoleError",
    "DetectionError",
    "HandlerExecutionError",
    "StreamClosedSignal",
    "UnknownCommandError",
    "WorkspaceAlreadyAttachedError",
    "WorkspaceRequiredError",
]

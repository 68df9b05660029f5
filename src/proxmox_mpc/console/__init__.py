"""
Interactive console for proxmox-mpc.

Lines starting with / are slash commands looked up in a CommandRegistry;
create/delete/list/describe lines go to the resource handler; help, exit
and quit are handled by the console itself.
"""

from __future__ import annotations

from proxmox_mpc.console.classifier import (
    BUILTIN_KEYWORDS,
    RESOURCE_PREFIXES,
    ClassifiedInput,
    InputKind,
    classify,
)
from proxmox_mpc.console.engine import ConsoleState, DispatchOutcome, InteractiveConsole
from proxmox_mpc.console.registry import CommandEntry, CommandRegistry
from proxmox_mpc.console.session import ConsoleSession

__all__ = [
    "BUILTIN_KEYWORDS",
    "RESOURCE_PREFIXES",
    "ClassifiedInput",
    "CommandEntry",
    "CommandRegistry",
    "ConsoleSession",
    "ConsoleState",
    "DispatchOutcome",
    "InputKind",
    "InteractiveConsole",
    "classify",
]

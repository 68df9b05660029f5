"""
Command registry for the proxmox-mpc console.

Commands are registered with a name, handler function, and metadata.
Registering a name that already exists silently replaces the handler; the
command keeps its original position in the listing.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterator, Optional, Union

from proxmox_mpc.core.exceptions import UnknownCommandError

if TYPE_CHECKING:
    from proxmox_mpc.console.session import ConsoleSession

HandlerResult = Union[bool, None, Awaitable[Optional[bool]]]
CommandHandler = Callable[[list[str], "ConsoleSession"], HandlerResult]


@dataclass
class CommandEntry:
    """Entry for a registered command."""

    name: str
    handler: CommandHandler
    description: str = ""
    usage: Optional[str] = None

    def __post_init__(self):
        if self.usage is None:
            self.usage = f"/{self.name}"


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


class CommandRegistry:
    """Registry for slash commands."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str = "",
        usage: Optional[str] = None,
    ) -> CommandEntry:
        """Register a command handler.

        Args:
            name: Command name without the / prefix (e.g., "status")
            handler: Callable taking (args, session); returning True requests exit
            description: Short description for /help
            usage: Usage string (e.g., "/history [n]")

        Returns:
            The registered CommandEntry
        """
        if name.startswith("/"):
            name = name[1:]
        if not name or any(c.isspace() for c in name):
            raise ValueError(f"Invalid command name: {name!r}")

        entry = CommandEntry(name=name, handler=handler, description=description, usage=usage)
        self._commands[name] = entry
        return entry

    def command(
        self,
        name: str,
        description: str = "",
        usage: Optional[str] = None,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator form of register().

        Example:
            @registry.command("ping", "Reply with pong")
            def cmd_ping(args, session):
                print("pong")
        """
        def decorator(func: CommandHandler) -> CommandHandler:
            self.register(name, func, description=description, usage=usage)
            return func
        return decorator

    def has(self, name: str) -> bool:
        """Check if a command is registered."""
        return name in self._commands

    def get(self, name: str) -> CommandEntry | None:
        """Get a command by name."""
        return self._commands.get(name)

    def execute(self, name: str, args: list[str], session: "ConsoleSession") -> Optional[bool]:
        """Run a command and return its result.

        Coroutine handlers are run to completion before returning. Handler
        exceptions propagate unchanged.

        Raises:
            UnknownCommandError: name is not registered.
        """
        entry = self._commands.get(name)
        if entry is None:
            raise UnknownCommandError(name)

        result = entry.handler(list(args), session)
        if inspect.isawaitable(result):
            result = asyncio.run(_await(result))
        return result

    def list(self) -> list[tuple[str, str]]:
        """(name, description) pairs in registration order."""
        return [(entry.name, entry.description) for entry in self._commands.values()]

    def entries(self) -> list[CommandEntry]:
        """All registered commands in registration order."""
        return list(self._commands.values())

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._commands)

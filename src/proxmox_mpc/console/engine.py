"""
Interactive console engine.

InteractiveConsole reads one line, classifies it, dispatches it and prints
the prompt again until an exit keyword, /exit, end of input or Ctrl+C.
Only one command runs at a time: the next line is not read until the
current handler (including coroutine handlers) has finished or failed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from proxmox_mpc import __version__
from proxmox_mpc.config import Config
from proxmox_mpc.console.classifier import ClassifiedInput, InputKind, classify
from proxmox_mpc.console.commands import register_builtins
from proxmox_mpc.console.commands.help import render_help
from proxmox_mpc.console.commands.sync import SyncService
from proxmox_mpc.console.loader import load_user_commands
from proxmox_mpc.console.readers import LineReader, make_reader
from proxmox_mpc.console.registry import CommandRegistry
from proxmox_mpc.console.resources import ResourceCommandHandler, StubResourceHandler
from proxmox_mpc.console.session import ConsoleSession, WorkspaceDetector
from proxmox_mpc.core.exceptions import HandlerExecutionError, StreamClosedSignal
from proxmox_mpc.log import log_exception
from proxmox_mpc.workspace import ProjectWorkspace, detect_workspace

logger = logging.getLogger(__name__)

EXIT_OK = 0

UNKNOWN_SLASH_HINT = "Available slash commands: /help, /init, /status, /sync, /exit"
UNKNOWN_COMMAND_HINT = 'Type "help" or "/help" for available commands'


class ConsoleState(str, Enum):
    IDLE = "idle"
    CLASSIFYING = "classifying"
    DISPATCHING = "dispatching"
    STOPPED = "stopped"


@dataclass
class DispatchOutcome:
    """Result of handling one input line."""

    kind: InputKind
    stop: bool = False
    error: Optional[BaseException] = None


class InteractiveConsole:
    """The console read/dispatch loop.

    Args:
        reader: Line reader; built from config on first run() when omitted.
        registry: Command registry; defaults to the built-in commands plus
            user commands from ~/.proxmox-mpc/commands.
        detector: Workspace detector consulted once by start().
        resource_handler: Receives create/delete/list/describe lines.
        config: Console settings; defaults to built-in defaults.
        cwd: Directory used for workspace detection and /init.
        sync_service: Collaborator behind /sync.
    """

    def __init__(
        self,
        reader: Optional[LineReader] = None,
        registry: Optional[CommandRegistry] = None,
        detector: Optional[WorkspaceDetector] = None,
        resource_handler: Optional[ResourceCommandHandler] = None,
        config: Optional[Config] = None,
        cwd: Optional[Path] = None,
        sync_service: Optional[SyncService] = None,
    ):
        self.config = config or Config()
        self.session = ConsoleSession(cwd=Path(cwd) if cwd else Path.cwd())
        self.registry = registry if registry is not None else self._build_registry(sync_service)
        self.detector: WorkspaceDetector = detector or detect_workspace
        self.resource_handler = resource_handler or StubResourceHandler()
        self._reader = reader
        self._state = ConsoleState.IDLE

    def _build_registry(self, sync_service: Optional[SyncService]) -> CommandRegistry:
        registry = CommandRegistry()
        register_builtins(registry, sync_service=sync_service)
        if self.config.get("load_user_commands"):
            loaded = load_user_commands(registry)
            if loaded:
                logger.info(f"Loaded {loaded} user command(s)")
        return registry

    @property
    def state(self) -> ConsoleState:
        return self._state

    @property
    def prompt(self) -> str:
        return self.config.get("prompt")

    def start(self) -> int:
        """Show the banner, detect the workspace and run the loop.

        Returns:
            Process exit status.
        """
        self.display_welcome()
        self.detect_workspace()
        return self.run()

    def stop(self) -> None:
        """Stop the loop after the current line."""
        self._state = ConsoleState.STOPPED

    def run(self) -> int:
        """Read and dispatch lines until stopped.

        Returns:
            Process exit status (always 0).
        """
        reader = self._reader or make_reader(self.config)
        self._reader = reader
        try:
            self._loop(reader)
        except KeyboardInterrupt:
            # Any in-flight handler is abandoned
            self._state = ConsoleState.STOPPED
            logger.info("Console interrupted")
            print("\n\n👋 Goodbye!")
            return EXIT_OK

        self.display_goodbye()
        return EXIT_OK

    def _loop(self, reader: LineReader) -> None:
        while self._state is not ConsoleState.STOPPED:
            self._state = ConsoleState.IDLE
            try:
                raw = reader.read(self.prompt)
            except (EOFError, StreamClosedSignal):
                logger.debug("Input stream closed")
                self.stop()
                break

            outcome = self.handle_line(raw)
            if outcome.stop:
                self.stop()

    def handle_line(self, raw: str) -> DispatchOutcome:
        """Record, classify and dispatch one input line.

        Errors raised while dispatching are reported and returned in the
        outcome; they never stop the console.
        """
        line = raw.strip()
        if not line:
            return DispatchOutcome(InputKind.EMPTY)

        self.session.record(line)

        self._state = ConsoleState.CLASSIFYING
        classified = classify(line)

        self._state = ConsoleState.DISPATCHING
        try:
            stop = self._dispatch(classified)
            return DispatchOutcome(classified.kind, stop=stop)
        except Exception as e:
            message = log_exception(e, context=f"Command failed: {line}", logger_name=__name__)
            print(f"❌ Error: {message}")
            return DispatchOutcome(classified.kind, error=e)
        finally:
            if self._state is not ConsoleState.STOPPED:
                self._state = ConsoleState.IDLE

    def _dispatch(self, classified: ClassifiedInput) -> bool:
        """Run the path chosen by the classifier. Returns True to stop."""
        kind = classified.kind

        if kind is InputKind.SLASH:
            return self._dispatch_slash(classified.command, classified.args)

        if kind is InputKind.RESOURCE:
            self.resource_handler.handle(classified.line)
            return False

        if kind is InputKind.BUILTIN:
            if classified.command == "help":
                self.display_help()
                return False
            return True  # exit / quit

        print(f"Unknown command: {classified.line}")
        print(UNKNOWN_COMMAND_HINT)
        return False

    def _dispatch_slash(self, name: str, args: list[str]) -> bool:
        if not self.registry.has(name):
            print(f"❌ Unknown slash command: /{name}")
            print(UNKNOWN_SLASH_HINT)
            return False

        try:
            result = self.registry.execute(name, args, self.session)
        except Exception as e:
            raise HandlerExecutionError(name, e) from e
        return result is True

    def detect_workspace(self) -> Optional[ProjectWorkspace]:
        """Attach the workspace of the working directory, if any.

        Detection problems are logged at debug level and otherwise ignored.
        """
        if self.session.workspace is not None:
            return self.session.workspace

        try:
            workspace = self.detector(self.session.cwd)
        except Exception as e:
            logger.debug(f"Workspace detection failed: {e}")
            return None

        if workspace is None:
            return None

        self.session.attach_workspace(workspace)
        print(f"📁 Workspace detected: {workspace.name}")
        print(f"   Server: {workspace.config.host}")
        print(f"   Node: {workspace.config.node}")
        print()
        return workspace

    def display_welcome(self) -> None:
        print(f"🔧 Proxmox Infrastructure Console v{__version__}")
        print("Welcome! Type /help for commands or /init to get started.\n")
        print("💡 Tip: Use /init to initialize a new Proxmox project workspace")
        print("   or navigate to an existing project directory\n")

    def display_help(self) -> None:
        print(render_help(self.registry, self.session))
        print()

    def display_goodbye(self) -> None:
        seconds = self.session.elapsed_seconds()
        print(f"\n👋 Session ended ({seconds}s)")
        print("Thank you for using Proxmox-MPC!")

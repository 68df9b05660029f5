"""
Line readers for the console loop.

A reader has one method, ``read(prompt) -> str``. It raises EOFError when
the input stream closes and KeyboardInterrupt on Ctrl+C. Recall history
(Up/Down) is kept by the reader and is separate from the session history.
"""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.styles import Style

if TYPE_CHECKING:
    from proxmox_mpc.config import Config

# Recall history file path
HISTORY_FILE = Path.home() / ".proxmox-mpc" / "prompt_history"


class LineReader(Protocol):
    def read(self, prompt: str) -> str:
        ...


class _BoundedHistoryMixin:
    """Keep only the most recent max_entries strings."""

    max_entries: int

    def load_history_strings(self) -> Iterable[str]:
        # Parent yields newest first
        return islice(super().load_history_strings(), self.max_entries)

    def append_string(self, string: str) -> None:
        super().append_string(string)
        del self._loaded_strings[self.max_entries:]


class BoundedFileHistory(_BoundedHistoryMixin, FileHistory):
    """FileHistory that recalls at most max_entries lines."""

    def __init__(self, filename: str, max_entries: int = 1000):
        super().__init__(filename)
        self.max_entries = max_entries


class BoundedInMemoryHistory(_BoundedHistoryMixin, InMemoryHistory):
    """InMemoryHistory that recalls at most max_entries lines."""

    def __init__(self, max_entries: int = 1000):
        super().__init__()
        self.max_entries = max_entries


def get_style() -> Style:
    """Get the prompt style."""
    return Style.from_dict({
        "prompt": "ansicyan bold",
    })


class PromptToolkitReader:
    """Reader backed by a prompt_toolkit PromptSession."""

    def __init__(self, history_size: int = 1000, history_file: Optional[Path] = HISTORY_FILE):
        if history_file is not None:
            history_file.parent.mkdir(parents=True, exist_ok=True)
            history: History = BoundedFileHistory(str(history_file), max_entries=history_size)
        else:
            history = BoundedInMemoryHistory(max_entries=history_size)

        self.session: PromptSession = PromptSession(
            history=history,
            auto_suggest=AutoSuggestFromHistory(),
            style=get_style(),
            enable_history_search=True,
        )

    def read(self, prompt: str) -> str:
        return self.session.prompt([("class:prompt", prompt)])


class SimpleReader:
    """Reader using input() with readline recall history."""

    def __init__(self, history_size: int = 1000):
        try:
            import readline
        except ImportError:  # readline is unavailable on Windows
            readline = None
        self._readline = readline
        self.history_size = history_size
        if readline is not None:
            readline.set_history_length(history_size)

    def read(self, prompt: str) -> str:
        line = input(prompt)
        self._trim_history()
        return line

    def _trim_history(self) -> None:
        # set_history_length() only applies when writing a history file
        if self._readline is None:
            return
        while self._readline.get_current_history_length() > self.history_size:
            self._readline.remove_history_item(0)


def make_reader(config: "Config") -> LineReader:
    """Build the reader selected by config."""
    history_size = config.get("history_size")
    if config.get("simple"):
        return SimpleReader(history_size=history_size)
    history_file = HISTORY_FILE if config.get("persist_history") else None
    return PromptToolkitReader(history_size=history_size, history_file=history_file)

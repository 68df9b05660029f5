"""
Input classification for the console loop.

classify() decides which dispatch path one trimmed input line takes. The
checks run in a fixed order and the first match wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

RESOURCE_PREFIXES = ("create ", "delete ", "list ", "describe ")
BUILTIN_KEYWORDS = frozenset({"help", "exit", "quit"})

_SLASH_RE = re.compile(r"(\S*)\s*(.*)", re.DOTALL)


class InputKind(str, Enum):
    EMPTY = "empty"
    SLASH = "slash"
    RESOURCE = "resource"
    BUILTIN = "builtin"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedInput:
    """Result of classifying one input line.

    ``command`` and ``args`` are only filled for slash commands (the name
    without ``/``) and built-in keywords (the keyword itself).
    """

    kind: InputKind
    line: str
    command: str = ""
    args: list[str] = field(default_factory=list)


def split_slash_command(line: str) -> tuple[str, list[str]]:
    """Split "/name a b" into ("name", ["a", "b"]).

    The name is everything before the first whitespace, so "/ help" has an
    empty name.
    """
    name, rest = _SLASH_RE.match(line[1:]).groups()
    return name, rest.split()


def classify(line: str, keywords: Iterable[str] = BUILTIN_KEYWORDS) -> ClassifiedInput:
    """Classify one trimmed input line."""
    if not line:
        return ClassifiedInput(InputKind.EMPTY, line)

    if line.startswith("/"):
        name, args = split_slash_command(line)
        return ClassifiedInput(InputKind.SLASH, line, command=name, args=args)

    if line.startswith(RESOURCE_PREFIXES):
        return ClassifiedInput(InputKind.RESOURCE, line)

    if line in frozenset(keywords):
        return ClassifiedInput(InputKind.BUILTIN, line, command=line)

    return ClassifiedInput(InputKind.UNRECOGNIZED, line)

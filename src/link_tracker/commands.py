"""Parsing of the line-oriented command language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

LINK = "link"
UNLINK = "unlink"
CONNECTED = "connected"


@dataclass(frozen=True)
class CommandKeywords:
    """Keywords recognised at the start of a command line."""

    add: str = "add"
    remove: str = "remove"
    query: Tuple[str, str] = ("is", "linked")


@dataclass(frozen=True)
class Command:
    """A parsed command: one action applied to two vertex identifiers."""

    action: str
    left: str
    right: str


def tokenize(line: str) -> List[str]:
    return line.split()


def is_terminator(line: str) -> bool:
    """Return True for the empty line that ends an interactive session.

    A line holding only spaces is not a terminator; it is parsed and ignored.
    """

    return not line.rstrip("\r\n")


def parse_command(line: str, keywords: CommandKeywords | None = None) -> Command | None:
    """Parse a single command line.

    `add A B` and `remove A B` take exactly three tokens, `is linked A B`
    takes exactly four. Keywords are matched case-insensitively and
    identifiers are kept verbatim. Returns None for anything else.
    """

    keywords = keywords or CommandKeywords()
    tokens = tokenize(line)
    if len(tokens) == 3:
        head = tokens[0].lower()
        if head == keywords.add.lower():
            return Command(LINK, tokens[1], tokens[2])
        if head == keywords.remove.lower():
            return Command(UNLINK, tokens[1], tokens[2])
        return None
    if len(tokens) == 4:
        first, second = (word.lower() for word in keywords.query)
        if tokens[0].lower() == first and tokens[1].lower() == second:
            return Command(CONNECTED, tokens[2], tokens[3])
    return None


def format_answer(value: bool) -> str:
    return "true" if value else "false"


__all__ = [
    "LINK",
    "UNLINK",
    "CONNECTED",
    "Command",
    "CommandKeywords",
    "tokenize",
    "is_terminator",
    "parse_command",
    "format_answer",
]

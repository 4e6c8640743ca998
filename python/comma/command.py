"""Command records built from tokenized command lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .errors import EmptyCommandError
from .lexer import join, tokenize
from .syntax import Syntax

LOGGER = logging.getLogger("comma.command")


@dataclass(frozen=True)
class Command:
    """A command name and its arguments, in the order they were written."""

    name: str
    arguments: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @classmethod
    def parse(cls, text: str, *, syntax: Optional[Syntax] = None) -> "Command":
        """Tokenize ``text`` and build a command from the tokens."""
        return build_command(tokenize(text, syntax=syntax))

    @property
    def argv(self) -> List[str]:
        """The name followed by the arguments, as one list."""
        return [self.name, *self.arguments]

    def __str__(self) -> str:
        return join(self.argv)


def build_command(tokens: Sequence[str]) -> Command:
    """Split tokens into a command name and its arguments.

    Raises :class:`~comma.errors.EmptyCommandError` if ``tokens`` is empty.
    """
    if not tokens:
        LOGGER.debug("rejecting empty command")
        raise EmptyCommandError()
    name, *arguments = tokens
    return Command(name=name, arguments=tuple(arguments))


def parse_command(text: str, *, syntax: Optional[Syntax] = None) -> Command:
    """Module-level shortcut for :meth:`Command.parse`."""
    return Command.parse(text, syntax=syntax)


__all__ = ["Command", "build_command", "parse_command"]

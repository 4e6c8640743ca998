"""Exception types raised while tokenizing and building commands."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class CommandSyntaxError(ValueError):
    """Raised when a command string cannot be turned into a command."""


class ParseErrorKind(Enum):
    UNTERMINATED_QUOTE = "unterminated_quote"
    UNTERMINATED_ESCAPE = "unterminated_escape"


class ParseError(CommandSyntaxError):
    """Raised when the tokenizer rejects its input."""

    kind: ParseErrorKind
    default_message = "malformed command"

    def __init__(self, text: str, position: int, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.text = text
        self.position = position

    def __reduce__(self):
        return (type(self), (self.text, self.position, self.args[0]))

    def __str__(self) -> str:
        return f"{self.args[0]} (at column {self.position + 1})"


class UnterminatedQuoteError(ParseError):
    """Raised when the input ends inside a quoted region."""

    kind = ParseErrorKind.UNTERMINATED_QUOTE
    default_message = "unterminated quote in command"

    def __init__(self, text: str, position: int, quote: str, message: Optional[str] = None) -> None:
        super().__init__(text, position, message)
        self.quote = quote

    def __reduce__(self):
        return (type(self), (self.text, self.position, self.quote, self.args[0]))


class UnterminatedEscapeError(ParseError):
    """Raised when the input ends right after an escape character."""

    kind = ParseErrorKind.UNTERMINATED_ESCAPE
    default_message = "unterminated escape in command"


class EmptyCommandError(CommandSyntaxError):
    """Raised when a command string has no tokens at all."""

    def __init__(self, message: str = "command string has no command name or arguments") -> None:
        super().__init__(message)


__all__ = [
    "CommandSyntaxError",
    "ParseErrorKind",
    "ParseError",
    "UnterminatedQuoteError",
    "UnterminatedEscapeError",
    "EmptyCommandError",
]

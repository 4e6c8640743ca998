"""
comma command-line tokenizer package.

Turns one line of shell-like text into tokens (``tokenize``) and splits
those tokens into a command name plus arguments (``build_command`` /
``Command.parse``).  Quoting, escaping and whitespace rules are described in
``comma.lexer``; the configurable parts live in ``comma.syntax``.
"""

from __future__ import annotations

from .command import Command, build_command, parse_command
from .errors import (
    CommandSyntaxError,
    EmptyCommandError,
    ParseError,
    ParseErrorKind,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from .lexer import LexState, join, quote, tokenize
from .syntax import DEFAULT_SYNTAX, LEGACY_SYNTAX, Syntax

__all__ = [
    "Command",
    "build_command",
    "parse_command",
    "tokenize",
    "quote",
    "join",
    "LexState",
    "Syntax",
    "DEFAULT_SYNTAX",
    "LEGACY_SYNTAX",
    "CommandSyntaxError",
    "EmptyCommandError",
    "ParseError",
    "ParseErrorKind",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
]
__version__ = "0.1.0"

"""Configurable syntax rules for the command tokenizer.

A :class:`Syntax` names the quote characters, the escape character and the
escape translation table.  Two presets are provided:

``DEFAULT_SYNTAX``
    Both ``'`` and ``"`` open quoted regions; ``\\n``, ``\\r`` and ``\\t``
    translate to newline, carriage return and tab.

``LEGACY_SYNTAX``
    Only ``"`` quotes; every escaped character is copied verbatim.  This is
    the behaviour of earlier releases and is kept for callers that depend on
    it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional


def is_whitespace(char: str) -> bool:
    """True for Unicode ``White_Space`` characters.

    ``str.isspace`` also accepts the information separators U+001C..U+001F,
    which are ordinary characters here.
    """
    if "\x1c" <= char <= "\x1f":
        return False
    return char.isspace()


def _default_escapes() -> Dict[str, str]:
    return {"n": "\n", "r": "\r", "t": "\t"}


@dataclass(frozen=True)
class Syntax:
    """Immutable description of quote and escape characters."""

    quotes: str = "'\""
    escapes: Mapping[str, str] = field(default_factory=_default_escapes)
    escape: str = "\\"

    def __post_init__(self) -> None:
        object.__setattr__(self, "escapes", MappingProxyType(dict(self.escapes)))
        self.validate()

    def validate(self) -> None:
        if len(self.escape) != 1:
            raise ValueError(f"escape must be a single character, got {self.escape!r}")
        if is_whitespace(self.escape):
            raise ValueError("escape character cannot be whitespace")
        if not self.quotes:
            raise ValueError("at least one quote character is required")
        if len(set(self.quotes)) != len(self.quotes):
            raise ValueError(f"duplicate quote characters in {self.quotes!r}")
        for quote in self.quotes:
            if is_whitespace(quote):
                raise ValueError("quote characters cannot be whitespace")
            if quote == self.escape:
                raise ValueError(f"{quote!r} cannot be both a quote and the escape character")
        for key in self.escapes:
            if len(key) != 1:
                raise ValueError(f"escape sequence keys must be single characters, got {key!r}")
            if key == self.escape or key in self.quotes:
                raise ValueError(f"escape table cannot remap {key!r}")

    def is_quote(self, char: str) -> bool:
        return char in self.quotes

    def translate(self, char: str) -> str:
        """Resolve the character following an escape."""
        return self.escapes.get(char, char)

    def reverse_escapes(self) -> Dict[str, str]:
        """Map translated characters back to the key that produces them."""
        reverse: Dict[str, str] = {}
        for key, value in self.escapes.items():
            if len(value) == 1 and value != key:
                reverse.setdefault(value, key)
        return reverse


DEFAULT_SYNTAX = Syntax()
LEGACY_SYNTAX = Syntax(quotes='"', escapes={})


def resolve_syntax(syntax: Optional[Syntax]) -> Syntax:
    return DEFAULT_SYNTAX if syntax is None else syntax


__all__ = ["Syntax", "DEFAULT_SYNTAX", "LEGACY_SYNTAX", "is_whitespace", "resolve_syntax"]

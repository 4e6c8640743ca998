"""Single-pass tokenizer for shell-like command lines."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .errors import ParseError, UnterminatedEscapeError, UnterminatedQuoteError
from .syntax import Syntax, is_whitespace, resolve_syntax

LOGGER = logging.getLogger("comma.lexer")


class LexState(Enum):
    IDLE = "idle"
    IN_TOKEN = "in_token"
    IN_QUOTE = "in_quote"
    ESCAPED = "escaped"


class _Lexer:
    """Character state machine for one tokenize call.

    A token buffer is only opened by a content-producing transition out of
    ``IDLE``, so whitespace alone never yields a token.  ``""`` does open a
    buffer and therefore produces an empty token.
    """

    def __init__(self, text: str, syntax: Syntax) -> None:
        self.text = text
        self.syntax = syntax
        self.state = LexState.IDLE
        self.tokens: List[str] = []
        self._buffer: Optional[List[str]] = None
        self._quote = ""
        self._quote_start = 0
        self._escape_start = 0
        self._return_state = LexState.IN_TOKEN
        self._handlers: Dict[LexState, Callable[[int, str], None]] = {
            LexState.IDLE: self._handle_idle,
            LexState.IN_TOKEN: self._handle_token,
            LexState.IN_QUOTE: self._handle_quote,
            LexState.ESCAPED: self._handle_escaped,
        }

    def run(self) -> List[str]:
        for index, char in enumerate(self.text):
            self._handlers[self.state](index, char)
        self._finish()
        return self.tokens

    # ------------------------------------------------------------------
    # buffer helpers

    def _open(self) -> None:
        self._buffer = []

    def _current(self) -> List[str]:
        buffer = self._buffer
        if buffer is None:
            raise RuntimeError(f"no open token in state {self.state.value}")
        return buffer

    def _append(self, char: str) -> None:
        self._current().append(char)

    def _finalize(self) -> None:
        self.tokens.append("".join(self._current()))
        self._buffer = None

    def _enter_quote(self, index: int, quote: str) -> None:
        self._quote = quote
        self._quote_start = index
        self.state = LexState.IN_QUOTE

    def _enter_escape(self, index: int, return_state: LexState) -> None:
        self._escape_start = index
        self._return_state = return_state
        self.state = LexState.ESCAPED

    # ------------------------------------------------------------------
    # per-state transitions

    def _handle_idle(self, index: int, char: str) -> None:
        if is_whitespace(char):
            return
        self._open()
        if self.syntax.is_quote(char):
            self._enter_quote(index, char)
        elif char == self.syntax.escape:
            self._enter_escape(index, LexState.IN_TOKEN)
        else:
            self._append(char)
            self.state = LexState.IN_TOKEN

    def _handle_token(self, index: int, char: str) -> None:
        if is_whitespace(char):
            self._finalize()
            self.state = LexState.IDLE
        elif self.syntax.is_quote(char):
            self._enter_quote(index, char)
        elif char == self.syntax.escape:
            self._enter_escape(index, LexState.IN_TOKEN)
        else:
            self._append(char)

    def _handle_quote(self, index: int, char: str) -> None:
        if char == self._quote:
            self._quote = ""
            self.state = LexState.IN_TOKEN
        elif char == self.syntax.escape:
            self._enter_escape(index, LexState.IN_QUOTE)
        else:
            self._append(char)

    def _handle_escaped(self, index: int, char: str) -> None:
        self._append(self.syntax.translate(char))
        self.state = self._return_state

    def _finish(self) -> None:
        if self.state is LexState.IN_TOKEN:
            self._finalize()
        elif self.state is LexState.IN_QUOTE:
            raise UnterminatedQuoteError(self.text, self._quote_start, self._quote)
        elif self.state is LexState.ESCAPED:
            raise UnterminatedEscapeError(self.text, self._escape_start)


def tokenize(text: str, *, syntax: Optional[Syntax] = None) -> List[str]:
    """Split one line of command text into tokens.

    Unquoted whitespace separates tokens and runs of it collapse.  Quoted
    regions keep whitespace literally without starting a new token, so
    ``a"b c"d`` is the single token ``ab cd``.  A backslash escapes the next
    character, translating ``n``, ``r`` and ``t`` (with the default syntax)
    and copying anything else verbatim.

    Raises :class:`~comma.errors.UnterminatedQuoteError` or
    :class:`~comma.errors.UnterminatedEscapeError` when the input ends inside
    a quote or right after a backslash; no partial result is returned.
    """
    lexer = _Lexer(text, resolve_syntax(syntax))
    try:
        tokens = lexer.run()
    except ParseError as exc:
        LOGGER.debug("tokenize failed: %s at %d", exc.kind.value, exc.position)
        raise
    LOGGER.debug("tokenized %d chars into %d tokens", len(text), len(tokens))
    return tokens


def _needs_quoting(token: str, syntax: Syntax, reverse: Dict[str, str]) -> bool:
    if not token:
        return True
    for char in token:
        if is_whitespace(char) or syntax.is_quote(char) or char == syntax.escape or char in reverse:
            return True
    return False


def quote(token: str, *, syntax: Optional[Syntax] = None) -> str:
    """Return text that tokenizes back to exactly ``[token]``."""
    syntax = resolve_syntax(syntax)
    reverse = syntax.reverse_escapes()
    if not _needs_quoting(token, syntax, reverse):
        return token
    mark = syntax.quotes[0]
    parts = [mark]
    for char in token:
        if char == mark or char == syntax.escape:
            parts.append(syntax.escape + char)
        elif char in reverse:
            parts.append(syntax.escape + reverse[char])
        else:
            parts.append(char)
    parts.append(mark)
    return "".join(parts)


def join(tokens: Iterable[str], *, syntax: Optional[Syntax] = None) -> str:
    """Quote each token and join them with single spaces."""
    return " ".join(quote(token, syntax=syntax) for token in tokens)


__all__ = ["LexState", "tokenize", "quote", "join"]

"""Tests for tokenizer syntax configuration."""

from __future__ import annotations

import dataclasses

import pytest

from comma.errors import UnterminatedQuoteError
from comma.lexer import join, quote, tokenize
from comma.syntax import DEFAULT_SYNTAX, LEGACY_SYNTAX, Syntax, is_whitespace, resolve_syntax


def test_resolve_syntax_defaults() -> None:
    assert resolve_syntax(None) is DEFAULT_SYNTAX
    assert resolve_syntax(LEGACY_SYNTAX) is LEGACY_SYNTAX


def test_is_whitespace_excludes_information_separators() -> None:
    for char in " \t\n\r\x0b\x0c\x85\xa0\u2028\u3000":
        assert is_whitespace(char)
    for char in "\x1c\x1d\x1e\x1fa\\":
        assert not is_whitespace(char)


def test_default_syntax_translation_table() -> None:
    assert DEFAULT_SYNTAX.translate("n") == "\n"
    assert DEFAULT_SYNTAX.translate("x") == "x"
    assert DEFAULT_SYNTAX.reverse_escapes() == {"\n": "n", "\r": "r", "\t": "t"}


def test_legacy_syntax_only_double_quotes() -> None:
    assert tokenize("it's here", syntax=LEGACY_SYNTAX) == ["it's", "here"]
    assert tokenize("'a b'", syntax=LEGACY_SYNTAX) == ["'a", "b'"]
    assert tokenize('"a b"', syntax=LEGACY_SYNTAX) == ["a b"]


def test_legacy_syntax_copies_escapes_verbatim() -> None:
    assert tokenize(r"\n\t", syntax=LEGACY_SYNTAX) == ["nt"]
    assert tokenize(r'"\"x\""', syntax=LEGACY_SYNTAX) == ['"x"']


def test_legacy_syntax_still_rejects_unterminated_quote() -> None:
    with pytest.raises(UnterminatedQuoteError):
        tokenize('"open', syntax=LEGACY_SYNTAX)


def test_legacy_quote_uses_double_quotes() -> None:
    assert quote("a b", syntax=LEGACY_SYNTAX) == '"a b"'
    tokens = ["x", "line\nbreak", 'say "hi"']
    assert tokenize(join(tokens, syntax=LEGACY_SYNTAX), syntax=LEGACY_SYNTAX) == tokens


def test_custom_syntax() -> None:
    syntax = Syntax(quotes="|", escapes={"e": "\x1b"}, escape="^")
    assert tokenize("|a b| ^e ^|", syntax=syntax) == ["a b", "\x1b", "|"]
    assert tokenize("\\n", syntax=syntax) == ["\\n"]
    assert quote("\x1b x", syntax=syntax) == "|^e x|"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"escape": ""},
        {"escape": "ab"},
        {"escape": " "},
        {"quotes": ""},
        {"quotes": "''"},
        {"quotes": "\t"},
        {"quotes": "\\"},
        {"escapes": {"ab": "x"}},
        {"escapes": {"\\": "x"}},
        {"escapes": {'"': "x"}},
    ],
)
def test_invalid_syntax_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        Syntax(**kwargs)


def test_syntax_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SYNTAX.quotes = "x"  # type: ignore[misc]
    with pytest.raises(TypeError):
        DEFAULT_SYNTAX.escapes["x"] = "y"  # type: ignore[index]


def test_syntax_copies_escape_table() -> None:
    table = {"n": "\n"}
    syntax = Syntax(escapes=table)
    table["t"] = "\t"
    assert syntax.translate("t") == "t"

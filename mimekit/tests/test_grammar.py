"""Tests for the token grammar."""

from __future__ import annotations

import pytest

from mimekit.errors import InvalidCharacterError
from mimekit.grammar import (
    SEPARATORS,
    TOKEN_CHARS,
    is_quoted_string,
    is_token,
    unquote,
    validate_token,
)


class TestTokenChars:
    def test_excludes_control_characters(self) -> None:
        for i in list(range(32)) + [127]:
            assert chr(i) not in TOKEN_CHARS

    def test_excludes_separators(self) -> None:
        for char in '()<>@,;:\\"/[]?={} \t':
            assert char not in TOKEN_CHARS

    def test_separator_count(self) -> None:
        # 17 printable separators plus SP and HT
        assert len(SEPARATORS) == 19

    def test_includes_common_token_characters(self) -> None:
        for char in "azAZ09*+-._!#$%&'^`|~":
            assert char in TOKEN_CHARS

    def test_excludes_non_ascii(self) -> None:
        assert "é" not in TOKEN_CHARS

    def test_is_frozen(self) -> None:
        assert isinstance(TOKEN_CHARS, frozenset)


class TestValidateToken:
    def test_valid(self) -> None:
        validate_token("vnd.api+json")

    def test_invalid_raises_with_char(self) -> None:
        with pytest.raises(InvalidCharacterError) as info:
            validate_token("json{}")
        assert info.value.char == "{"
        assert info.value.context == "json{}"

    def test_custom_context(self) -> None:
        with pytest.raises(InvalidCharacterError) as info:
            validate_token("a b", context="subtype")
        assert info.value.char == " "
        assert info.value.context == "subtype"

    def test_tab_rejected(self) -> None:
        with pytest.raises(InvalidCharacterError):
            validate_token("a\tb")

    def test_is_token(self) -> None:
        assert is_token("plain")
        assert not is_token("")
        assert not is_token("a/b")

    @pytest.mark.slow
    def test_every_ascii_character(self) -> None:
        for i in range(128):
            char = chr(i)
            legal = 32 < i < 127 and char not in SEPARATORS
            if legal:
                validate_token(f"x{char}x")
            else:
                with pytest.raises(InvalidCharacterError):
                    validate_token(f"x{char}x")


class TestQuoting:
    def test_double_quoted(self) -> None:
        assert is_quoted_string('"utf-8"')

    def test_single_quoted(self) -> None:
        assert is_quoted_string("'utf-8'")

    def test_mismatched_quotes(self) -> None:
        assert not is_quoted_string("\"utf-8'")

    def test_too_short(self) -> None:
        assert not is_quoted_string('"')

    def test_empty_quotes_are_quoted(self) -> None:
        assert is_quoted_string('""')

    def test_unquote_strips_one_pair(self) -> None:
        assert unquote('""a""') == '"a"'

    def test_unquote_plain_passthrough(self) -> None:
        assert unquote("utf-8") == "utf-8"

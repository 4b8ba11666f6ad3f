"""Token grammar from RFC 2616 section 2.2.

A token is ``1*<any CHAR except CTLs or separators>``::

    CTL        = <octets 0 - 31 and DEL (127)>
    separators = "(" | ")" | "<" | ">" | "@" | "," | ";" | ":" | "\\" | <">
               | "/" | "[" | "]" | "?" | "=" | "{" | "}" | SP | HT
"""

from __future__ import annotations

from .errors import InvalidCharacterError

SEPARATORS: frozenset[str] = frozenset('()<>@,;:\\"/[]?={} \t')

TOKEN_CHARS: frozenset[str] = frozenset(
    chr(i) for i in range(32, 127) if chr(i) not in SEPARATORS
)

_QUOTES = ('"', "'")


def is_token(value: str) -> bool:
    return bool(value) and all(c in TOKEN_CHARS for c in value)


def validate_token(value: str, context: str | None = None) -> None:
    """Raise :class:`InvalidCharacterError` on the first character outside the token set."""
    for char in value:
        if char not in TOKEN_CHARS:
            raise InvalidCharacterError(char, context if context is not None else value)


def is_quoted_string(value: str) -> bool:
    """Return True if *value* is wrapped in a matching pair of single or double quotes."""
    return len(value) >= 2 and value[0] in _QUOTES and value[0] == value[-1]


def unquote(value: str) -> str:
    """Strip one matching pair of surrounding quotes, if present."""
    return value[1:-1] if is_quoted_string(value) else value

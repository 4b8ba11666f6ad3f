"""Exception hierarchy for MIME type construction and parsing."""

from __future__ import annotations

from typing import Any


class MimeTypeError(ValueError):
    """Base class for every error raised while building a MIME type."""


class EmptyFieldError(MimeTypeError):
    """A type, subtype, parameter or the raw input string is empty."""


class InvalidCharacterError(MimeTypeError):
    """A character outside the token grammar was found."""

    def __init__(self, char: str, context: str) -> None:
        self.char = char
        self.context = context
        super().__init__(f'Invalid character "{char}" in "{context}".')


class MissingSubtypeError(MimeTypeError):
    """The type/subtype segment has no ``/`` or nothing after it."""


class IllegalWildcardError(MimeTypeError):
    """Wildcard type combined with a concrete subtype."""


class MalformedParameterError(MimeTypeError):
    """A parameter segment is not a single ``name=value`` pair (strict parsing)."""


class InvalidQualityValueError(MimeTypeError):
    """The ``q`` parameter is not a number between 0.0 and 1.0."""


class InvalidElementError(MimeTypeError, TypeError):
    """A collection handed to a matcher contains something that is not a MIME type."""

    def __init__(self, index: Any, element: Any) -> None:
        self.index = index
        self.element = element
        super().__init__(
            f'Record at index "{index}" is not a MimeType, '
            f"found {type(element).__name__} instead."
        )

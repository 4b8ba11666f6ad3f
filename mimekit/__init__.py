"""MIME type value objects, matching, and ``Accept`` negotiation."""

from .errors import (
    EmptyFieldError,
    IllegalWildcardError,
    InvalidCharacterError,
    InvalidElementError,
    InvalidQualityValueError,
    MalformedParameterError,
    MimeTypeError,
    MissingSubtypeError,
)
from .media_type import MediaType
from .mimetype import MimeType
from .negotiation import parse_accept, quality_of, rank, select

__version__ = "1.0.0"

__all__ = [
    "EmptyFieldError",
    "IllegalWildcardError",
    "InvalidCharacterError",
    "InvalidElementError",
    "InvalidQualityValueError",
    "MalformedParameterError",
    "MediaType",
    "MimeType",
    "MimeTypeError",
    "MissingSubtypeError",
    "parse_accept",
    "quality_of",
    "rank",
    "select",
]

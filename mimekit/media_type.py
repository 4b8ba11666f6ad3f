"""Media types with quality-value (``q``) support, as used in ``Accept`` headers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TypeVar

from .errors import InvalidQualityValueError
from .grammar import unquote
from .mimetype import MimeType

QUALITY = "q"

_M = TypeVar("_M", bound="MediaType")


def parse_quality(raw: str) -> float:
    """Return the float behind a (possibly quoted) ``q`` value, or raise."""
    text = unquote(raw)
    try:
        value = float(text)
    except ValueError:
        raise InvalidQualityValueError(f'Invalid quality value "{text}", expected a number.') from None
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidQualityValueError(
            f'Invalid quality value "{text}", should be between 0.0 and 1.0.'
        )
    return value


class MediaType(MimeType):
    """A :class:`MimeType` that validates and exposes its ``q`` parameter."""

    __slots__ = ()

    def _validate_parameter(self, name: str, value: str) -> None:
        super()._validate_parameter(name, value)
        if name.lower() == QUALITY:
            parse_quality(value)

    @property
    def quality_name(self) -> str | None:
        """The stored spelling of the ``q`` parameter name (``q`` or ``Q``), if present."""
        for name in self.parameters:
            if name.lower() == QUALITY:
                return name
        return None

    @property
    def quality_value(self) -> float:
        name = self.quality_name
        raw = self.parameters[name] if name is not None else None
        return parse_quality(raw) if raw is not None else 1.0

    @property
    def specificity(self) -> int:
        """Higher is more specific: wildcards rank below concrete types, parameters add weight."""
        if self.is_wildcard_type():
            rank = 0
        elif self.is_wildcard_subtype():
            rank = 1
        else:
            rank = 2
        extra = sum(1 for name in self.parameters if name.lower() != QUALITY)
        return rank * 100 + extra

    def copy_quality_value(self: _M, other: MediaType) -> _M:
        """Return a copy carrying *other*'s ``q``; ``self`` if *other* has none."""
        source = other.quality_name
        if source is None:
            return self
        return self.with_parameter(self.quality_name or QUALITY, other.parameters[source])

    def remove_quality_value(self: _M) -> _M:
        name = self.quality_name
        return self if name is None else self.without_parameter(name)

    @staticmethod
    def sort_by_quality(media_types: Iterable[_M]) -> list[_M]:
        """Highest quality first; on ties, the more specific type first. Stable otherwise."""
        return sorted(media_types, key=lambda m: (-m.quality_value, -m.specificity))

"""``Accept`` header negotiation.

Media ranges are matched against the media types a server can offer; see
RFC 7231 section 5.3.2. Contents:

- :func:`parse_accept`: split an ``Accept`` header into media ranges, best first.
- :func:`quality_of`: the weight a client gives to one offered media type.
- :func:`rank`: the acceptable offers, best first.
- :func:`select`: the single best offer, or ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .errors import MimeTypeError
from .media_type import QUALITY, MediaType
from .media_types import ALL
from .mimetype import MimeType

logger = logging.getLogger(__name__)

AcceptInput = str | Sequence[MediaType] | None
OfferInput = str | MimeType


def parse_accept(header: str | None) -> list[MediaType]:
    """Return the media ranges of *header*, highest quality first.

    A missing or blank header accepts everything. Ranges that do not
    parse are skipped.

    >>> [str(r) for r in parse_accept("text/*;q=0.5, application/json")]
    ['application/json', 'text/*;q=0.5']
    """
    if header is None or not header.strip():
        return [ALL]

    ranges: list[MediaType] = []
    for item in header.split(","):
        item = item.strip()
        if not item:
            continue
        # Some old clients send a bare "*".
        if item == "*" or item.startswith("*;"):
            item = "*/*" + item[1:]
        try:
            ranges.append(MediaType.parse(item, strict=False))
        except MimeTypeError as exc:
            logger.debug("Skipping media range %r: %s", item, exc)
    return MediaType.sort_by_quality(ranges)


def _range_matches(media_range: MediaType, offer: MimeType) -> bool:
    if not media_range.includes(offer):
        return False
    for name, value in media_range.parameters.items():
        if name.lower() == QUALITY:
            continue
        if offer.get_parameter(name) != value:
            return False
    return True


def quality_of(offer: OfferInput, ranges: Iterable[MediaType]) -> float:
    """Quality of the most specific range matching *offer*; 0.0 if none match."""
    offered = _as_media_type(offer)
    best: MediaType | None = None
    for media_range in ranges:
        if not _range_matches(media_range, offered):
            continue
        if best is None or media_range.specificity > best.specificity:
            best = media_range
    return best.quality_value if best is not None else 0.0


def rank(accept: AcceptInput, offers: Iterable[OfferInput]) -> list[tuple[MediaType, float]]:
    """Acceptable offers with their quality, best first; ties keep the server's order."""
    ranges = _as_ranges(accept)
    scored = [(offer, quality_of(offer, ranges)) for offer in map(_as_media_type, offers)]
    acceptable = [(offer, q) for offer, q in scored if q > 0.0]
    return sorted(acceptable, key=lambda pair: -pair[1])


def select(accept: AcceptInput, offers: Iterable[OfferInput]) -> MediaType | None:
    """Return the offer the client prefers, or ``None`` when nothing is acceptable."""
    ranked = rank(accept, offers)
    return ranked[0][0] if ranked else None


def _as_ranges(accept: AcceptInput) -> list[MediaType]:
    if accept is None or isinstance(accept, str):
        return parse_accept(accept)
    return MediaType.sort_by_quality(_as_media_type(r) for r in accept)


def _as_media_type(value: OfferInput) -> MediaType:
    if isinstance(value, MediaType):
        return value
    if isinstance(value, MimeType):
        return MediaType(value.type, value.subtype, value.parameters)
    return MediaType.parse(value)

"""Pick a response media type for an aiohttp request."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from aiohttp import hdrs, web

from ..media_type import MediaType
from ..negotiation import OfferInput, select

logger = logging.getLogger(__name__)


def negotiate(request: web.BaseRequest, offers: Iterable[OfferInput]) -> MediaType:
    """Return the offer best matching the request's ``Accept`` header.

    Raises :class:`aiohttp.web.HTTPNotAcceptable` when no offer is acceptable.
    """
    offers = list(offers)
    accept = request.headers.get(hdrs.ACCEPT)
    chosen = select(accept, offers)
    if chosen is None:
        logger.info("No acceptable media type for Accept %r on %s", accept, request.path)
        raise web.HTTPNotAcceptable(
            text="Not acceptable; available: " + ", ".join(str(o) for o in offers),
        )
    return chosen

"""Map input errors raised by handlers to JSON 400 responses."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable

from aiohttp import web
from pydantic import ValidationError

from ..errors import MimeTypeError

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def _bad_request(message: str) -> web.Response:
    return web.json_response({"status": "error", "message": message}, status=400)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except MimeTypeError as exc:
        logger.info("Rejected MIME type on %s: %s", request.path, exc)
        return _bad_request(str(exc))
    except ValidationError as exc:
        message = "; ".join(err["msg"] for err in exc.errors())
        logger.info("Rejected request body on %s: %s", request.path, message)
        return _bad_request(message)
    except json.JSONDecodeError:
        return _bad_request("Request body is not valid JSON.")

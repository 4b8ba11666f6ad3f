"""HTTP server -- app factory and entry point."""

from __future__ import annotations

import logging

from aiohttp import web
from aiohttp.abc import AbstractAccessLogger

from .. import __version__
from ..config import settings
from .middleware import error_middleware
from .routes import MimeTypeRoutes

logger = logging.getLogger(__name__)

_QUIET_PATHS = frozenset({"/health"})


class QuietAccessLogger(AbstractAccessLogger):
    """Demotes health-check log entries to DEBUG."""

    def log(self, request: web.BaseRequest, response: web.StreamResponse, time: float) -> None:
        level = logging.DEBUG if request.path in _QUIET_PATHS else logging.INFO
        self.logger.log(
            level,
            "%s %s %s %s %.3fs",
            request.remote,
            request.method,
            request.path,
            response.status,
            time,
        )


async def _health(_req: web.Request) -> web.Response:
    return web.json_response({"status": "ok", "version": __version__})


def create_app() -> web.Application:
    app = web.Application(middlewares=[error_middleware])
    app.router.add_get("/health", _health)
    MimeTypeRoutes().register(app.router)
    return app


def main() -> None:
    cfg = settings.cfg
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    logger.info("Starting mimekit server on %s:%d ...", cfg.host, cfg.port)
    web.run_app(create_app(), host=cfg.host, port=cfg.port, access_log_class=QuietAccessLogger)


if __name__ == "__main__":
    main()

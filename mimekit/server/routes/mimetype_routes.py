"""MIME type API routes -- /api/mimetype/*."""

from __future__ import annotations

from aiohttp import web
from pydantic import BaseModel, Field

from ... import media_types
from ...media_type import MediaType
from ...negotiation import rank
from ..negotiate import negotiate

_LISTING_FORMATS = (media_types.APPLICATION_JSON, media_types.TEXT_PLAIN)


class ParseRequest(BaseModel):
    value: str
    strict: bool | None = None


class MatchRequest(BaseModel):
    pattern: MediaType
    candidate: MediaType


class NegotiateRequest(BaseModel):
    accept: str = ""
    offers: list[MediaType] = Field(min_length=1)


def _known_types() -> dict[str, str]:
    return {
        name: str(value)
        for name, value in vars(media_types).items()
        if isinstance(value, MediaType)
    }


class MimeTypeRoutes:
    """Parse, match and negotiate MIME types over HTTP."""

    def register(self, router: web.UrlDispatcher) -> None:
        router.add_get("/api/mimetype/types", self._list_types)
        router.add_post("/api/mimetype/parse", self._parse)
        router.add_post("/api/mimetype/match", self._match)
        router.add_post("/api/mimetype/negotiate", self._negotiate)

    async def _list_types(self, req: web.Request) -> web.Response:
        known = _known_types()
        chosen = negotiate(req, _LISTING_FORMATS)
        if chosen.equals_type_and_subtype(media_types.TEXT_PLAIN):
            lines = [f"{name}\t{value}" for name, value in known.items()]
            return web.Response(text="\n".join(lines) + "\n", content_type="text/plain")
        return web.json_response(known)

    async def _parse(self, req: web.Request) -> web.Response:
        body = ParseRequest.model_validate(await req.json())
        mime = MediaType.parse(body.value, strict=body.strict)
        return web.json_response({"status": "ok", "mimetype": mime.to_dict()})

    async def _match(self, req: web.Request) -> web.Response:
        body = MatchRequest.model_validate(await req.json())
        pattern, candidate = body.pattern, body.candidate
        return web.json_response({
            "status": "ok",
            "includes": pattern.includes(candidate),
            "compatible": pattern.is_compatible_with(candidate),
            "equals": pattern.equals(candidate),
            "equals_type_and_subtype": pattern.equals_type_and_subtype(candidate),
        })

    async def _negotiate(self, req: web.Request) -> web.Response:
        body = NegotiateRequest.model_validate(await req.json())
        ranked = rank(body.accept, body.offers)
        return web.json_response({
            "status": "ok",
            "selected": str(ranked[0][0]) if ranked else None,
            "ranking": [{"media_type": str(offer), "quality": q} for offer, q in ranked],
        })

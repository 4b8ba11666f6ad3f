"""aiohttp integration: content negotiation helper, JSON API, and app factory."""

from .negotiate import negotiate

__all__ = ["negotiate"]

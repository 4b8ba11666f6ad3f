"""Route handler classes."""

from .mimetype_routes import MimeTypeRoutes

__all__ = ["MimeTypeRoutes"]

"""Named constants for common media types."""

from __future__ import annotations

from .media_type import MediaType

ALL = MediaType("*", "*")
APPLICATION_ATOM_XML = MediaType("application", "atom+xml")
APPLICATION_CBOR = MediaType("application", "cbor")
APPLICATION_FORM_URLENCODED = MediaType("application", "x-www-form-urlencoded")
APPLICATION_JSON = MediaType("application", "json")
APPLICATION_NDJSON = MediaType("application", "x-ndjson")
APPLICATION_OCTET_STREAM = MediaType("application", "octet-stream")
APPLICATION_PDF = MediaType("application", "pdf")
APPLICATION_PROBLEM_JSON = MediaType("application", "problem+json")
APPLICATION_PROBLEM_XML = MediaType("application", "problem+xml")
APPLICATION_RSS_XML = MediaType("application", "rss+xml")
APPLICATION_STREAM_JSON = MediaType("application", "stream+json")
APPLICATION_XHTML_XML = MediaType("application", "xhtml+xml")
APPLICATION_XML = MediaType("application", "xml")
IMAGE_GIF = MediaType("image", "gif")
IMAGE_JPEG = MediaType("image", "jpeg")
IMAGE_PNG = MediaType("image", "png")
MULTIPART_FORM_DATA = MediaType("multipart", "form-data")
MULTIPART_MIXED = MediaType("multipart", "mixed")
MULTIPART_RELATED = MediaType("multipart", "related")
TEXT_EVENT_STREAM = MediaType("text", "event-stream")
TEXT_HTML = MediaType("text", "html")
TEXT_MARKDOWN = MediaType("text", "markdown")
TEXT_PLAIN = MediaType("text", "plain")
TEXT_XML = MediaType("text", "xml")

"""Exceptions raised by openapi-surface."""


class SurfaceError(Exception):
    """Base class for all openapi-surface errors."""


class MalformedDocumentError(SurfaceError):
    """The top-level document cannot be read as a Swagger 2.0 description."""


class UnsupportedFormatError(SurfaceError):
    """The document is not a Swagger 2.0 description (e.g. OpenAPI 3.x)."""

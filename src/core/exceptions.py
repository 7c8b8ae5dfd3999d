"""Custom exceptions. Every layer raises a subclass of GifExportError."""


class GifExportError(Exception):
    """Top-level exception of the application."""


class InvalidRequestError(GifExportError):
    """Request parameters could not be interpreted."""


class RepositoryError(GifExportError):
    """Record could not be found or stored."""


class UpstreamStatusError(GifExportError):
    """The rendering service answered with something else than 200."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"gif service status: {code}")


class StreamConsumedError(GifExportError):
    """A rendered byte stream can only be read once."""

"""Exception classes raised by the fetcher, extractors and clients."""

from typing import Any


class ResolverError(Exception):
    """Base class for all errors raised by this project."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class UpstreamUnavailable(ResolverError):
    """Raised when a page cannot be fetched (network error, timeout or non-2xx status)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None, details: Any | None = None):
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class ExtractionError(ResolverError):
    """Base class for failures while carving values out of a document."""


class MarkerNotFound(ExtractionError):
    """None of the start markers occurs in the text."""


class UnterminatedMarker(ExtractionError):
    """A start marker was found, but its end marker never follows it."""


class EmptyExtraction(ExtractionError):
    """The markers were found, but nothing lies between them."""


class BlockNotFound(ExtractionError):
    """The embedded array assignment is missing from the document."""


class MalformedArray(ExtractionError):
    """The carved array text is not a list of records."""


class TitleNotFound(ResolverError):
    """Raised when a title page does not describe an existing title."""


class ConfigurationError(ResolverError):
    """Raised when a required setting is missing."""

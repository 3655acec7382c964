"""Exception hierarchy raised by the documind pipeline."""

from __future__ import annotations


class DocumindError(RuntimeError):
    """Base class for every error the pipeline raises on purpose."""


class FetchError(DocumindError):
    """Raised when a URL cannot be retrieved.

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class InputValidationError(DocumindError):
    """Raised when a request is missing required input."""


class ExtractionError(DocumindError):
    """Raised when markup was fetched but could not be turned into a Document."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url

"""documind.parser - High-level DocumentParser class.

Bundles fetch settings into one reusable object::

    from documind import DocumentParser

    parser = DocumentParser(timeout=10)
    doc = parser.fetch("https://example.com/docs/install")

    # Parse pre-fetched HTML (no network)
    doc = parser.parse("<html><body>Content...</body></html>",
                       url="https://example.com")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from documind.query import extract as _extract
from documind.query import fetch_document as _fetch
from documind.query import handle_parse_request as _handle

if TYPE_CHECKING:
    from documind.items import Document, ParseResponse


class DocumentParser:
    """Document pipeline with per-instance fetch settings.

    Args:
        timeout:    Network timeout in seconds (default ``settings.FETCH_TIMEOUT``).
        user_agent: User-Agent header sent with the fetch
                    (default ``settings.USER_AGENT``).
    """

    def __init__(self, timeout: int | None = None, user_agent: str | None = None) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    def fetch(self, url: str) -> Document:
        """Fetch *url* and return its :class:`~documind.items.Document`.

        Raises:
            :class:`~documind.errors.InputValidationError`, :class:`~documind.errors.FetchError`
            or :class:`~documind.errors.ExtractionError`.
        """
        return _fetch(url, timeout=self._timeout, user_agent=self._user_agent)

    def parse(self, html: str, url: str = "") -> Document:
        """Parse pre-fetched HTML; no network calls."""
        return _extract(html, url=url)

    def handle(self, payload: Mapping[str, Any] | None) -> ParseResponse:
        """Serve one ``{"url": ...}`` request; never raises."""
        return _handle(payload, timeout=self._timeout, user_agent=self._user_agent)

"""documind.query - single-URL fetch and document assembly.

Uses only the stdlib (``urllib``) for HTTP.

Basic usage::

    from documind.query import fetch_document

    doc = fetch_document("https://example.com/docs/install")
    print(doc.title)
    print(doc.insights)
    for block in doc.code_blocks:
        print(block.language, block.code)

Low-level access::

    from documind.query import fetch_html, extract

    html = fetch_html("https://example.com/docs/install")
    doc = extract(html, url="https://example.com/docs/install")

Request-handler boundary (never raises)::

    from documind.query import handle_parse_request

    response = handle_parse_request({"url": "https://example.com/docs"})
    response.status, response.body()
"""

from __future__ import annotations

import asyncio
import gzip
import logging
import urllib.error
import urllib.request
import zlib
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from documind import settings
from documind.errors import ExtractionError, FetchError, InputValidationError
from documind.extractors.code_blocks import extract_code_blocks
from documind.extractors.main_content import select_content, strip_boilerplate
from documind.extractors.metadata import extract_title
from documind.extractors.sections import extract_sections
from documind.extractors.text import clean_content
from documind.extractors.tree import element_text, parse_markup
from documind.insights import generate_insights
from documind.items import Document, ErrorResponse, ParseResponse, StructuredContent

logger = logging.getLogger(__name__)

_URL_REQUIRED_MESSAGE = "URL is required"
_PARSE_FAILED_MESSAGE = "Failed to parse document"


def _decode_response_body(raw: bytes, headers: object | None, url: str) -> str:
    encoding = ""
    if headers is not None:
        try:
            encoding = str(headers.get("Content-Encoding", "")).lower().strip()
        except Exception:
            encoding = ""

    try:
        if encoding == "gzip":
            raw = gzip.decompress(raw)
        elif encoding in ("deflate", "zlib"):
            raw = zlib.decompress(raw)
    except (OSError, zlib.error) as exc:
        raise FetchError(f"{encoding} decompression failed for {url}: {exc}", url=url) from exc

    charset = "utf-8"
    if headers is not None:
        try:
            charset = headers.get_content_charset("utf-8") or "utf-8"
        except Exception:
            charset = "utf-8"
    try:
        return raw.decode(charset, errors="replace")
    except (LookupError, ValueError, TypeError):
        return raw.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Low-level HTTP fetch
# ---------------------------------------------------------------------------

def fetch_html(
    url: str,
    *,
    timeout: int | None = None,
    user_agent: str | None = None,
) -> str:
    """Fetch *url* once and return the response body as a decoded string.

    No retries: any failure is final for this request.

    Args:
        url:        Fully-qualified HTTP/HTTPS URL.
        timeout:    Request timeout in seconds (default ``settings.FETCH_TIMEOUT``).
        user_agent: Override the default browser User-Agent string.

    Returns:
        Response body decoded to ``str``.

    Raises:
        FetchError: On non-2xx statuses, connection failures, timeouts, or
            unsupported URL schemes.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise FetchError(f"Unsupported URL scheme: {parsed.scheme!r}", url=url)

    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": user_agent or settings.USER_AGENT,
            "Accept": (
                "text/html,application/xhtml+xml,application/xml;"
                "q=0.9,*/*;q=0.8"
            ),
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
        },
    )

    try:
        with urllib.request.urlopen(req, timeout=timeout or settings.FETCH_TIMEOUT) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                raise FetchError(f"HTTP {status} fetching {url}", url=url, status=status)
            raw: bytes = resp.read(settings.MAX_RESPONSE_BYTES)
            return _decode_response_body(raw, resp.headers, url)
    except urllib.error.HTTPError as exc:
        raise FetchError(
            f"HTTP {exc.code} fetching {url}: {exc.reason}", url=url, status=exc.code,
        ) from exc
    except urllib.error.URLError as exc:
        raise FetchError(f"URL error fetching {url}: {exc.reason}", url=url) from exc
    except (OSError, ValueError) as exc:
        # socket timeouts surface as OSError; malformed hosts as ValueError
        raise FetchError(f"Network error fetching {url}: {exc}", url=url) from exc


# ---------------------------------------------------------------------------
# Extraction (pure HTML -> Document, no network)
# ---------------------------------------------------------------------------

def extract(html: str, *, url: str = "") -> Document:
    """Run the full extraction pipeline over *html* and return a :class:`Document`.

    Steps, in order: parse, title, code blocks (on the untouched tree),
    boilerplate stripping, content selection, sections, text normalisation,
    insights.

    Raises:
        ExtractionError: If anything unexpected fails.  No partial document
            is ever returned.
    """
    try:
        soup = parse_markup(html)
        title = extract_title(soup)
        code_blocks = extract_code_blocks(soup)

        strip_boilerplate(soup)
        selection = select_content(soup)
        sections = extract_sections(selection.element)
        content = clean_content(element_text(selection.element))

        insights = generate_insights(content, title, code_blocks)
        document = Document(
            title=title,
            content=content,
            structured_content=StructuredContent(sections=sections),
            code_blocks=code_blocks,
            url=url,
            insights=insights,
        )
    except Exception as exc:
        raise ExtractionError(f"Failed to extract document from {url or 'markup'}: {exc}", url=url) from exc

    logger.debug(
        "extracted %r from %s via %r: %d chars, %d sections, %d code blocks",
        document.title, url, selection.selector, len(document.content),
        len(sections), len(code_blocks),
    )
    return document


def fetch_document(
    url: str,
    *,
    timeout: int | None = None,
    user_agent: str | None = None,
) -> Document:
    """Fetch *url* and return its extracted :class:`Document`.

    Raises:
        InputValidationError: If *url* is empty.
        FetchError: If the page cannot be retrieved.
        ExtractionError: If the markup cannot be turned into a document.
    """
    if not url or not str(url).strip():
        raise InputValidationError(_URL_REQUIRED_MESSAGE)
    html = fetch_html(url, timeout=timeout, user_agent=user_agent)
    return extract(html, url=url)


async def fetch_document_async(
    url: str,
    *,
    timeout: int | None = None,
    user_agent: str | None = None,
) -> Document:
    """Awaitable :func:`fetch_document`; the blocking work runs in a worker thread."""
    return await asyncio.to_thread(
        fetch_document, url, timeout=timeout, user_agent=user_agent,
    )


# ---------------------------------------------------------------------------
# Request boundary
# ---------------------------------------------------------------------------

def handle_parse_request(
    payload: Any,
    *,
    timeout: int | None = None,
    user_agent: str | None = None,
) -> ParseResponse:
    """Turn a ``{"url": ...}`` request into a :class:`ParseResponse`.

    Never raises.  A non-mapping payload or a missing URL maps to status
    400; every fetch or extraction failure maps to status 500 with a
    generic message.
    """
    url = payload.get("url") if isinstance(payload, Mapping) else None
    if not isinstance(url, str) or not url.strip():
        return ParseResponse(status=400, error=ErrorResponse(error=_URL_REQUIRED_MESSAGE))

    try:
        document = fetch_document(url, timeout=timeout, user_agent=user_agent)
    except InputValidationError as exc:
        return ParseResponse(status=400, error=ErrorResponse(error=str(exc)))
    except FetchError as exc:
        logger.warning("Document fetch failed for %s: %s", url, exc)
        return ParseResponse(status=500, error=ErrorResponse(error=_PARSE_FAILED_MESSAGE))
    except Exception:
        logger.exception("Document parsing error for %s", url)
        return ParseResponse(status=500, error=ErrorResponse(error=_PARSE_FAILED_MESSAGE))

    return ParseResponse(status=200, document=document)

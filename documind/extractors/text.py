"""Plain-text normalisation and sentence-aware truncation."""

from __future__ import annotations

import logging
import re

from documind import settings

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and blank-line sequences, then trim."""
    if not text:
        return ""
    text = _WHITESPACE_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n", text)
    return text.strip()


def truncate_text(
    text: str,
    limit: int | None = None,
    min_boundary: int | None = None,
) -> str:
    """Cut *text* to at most *limit* characters, preferring a sentence end.

    After the hard cut the last ``.`` is located; when it sits past
    *min_boundary* the text ends right after it, otherwise the hard cut is
    kept.  Only ``.`` counts as a sentence terminator.
    """
    limit = settings.MAX_CONTENT_CHARS if limit is None else limit
    min_boundary = settings.SENTENCE_BOUNDARY_MIN if min_boundary is None else min_boundary

    if len(text) <= limit:
        return text

    cut = text[:limit]
    last_period = cut.rfind(".")
    if last_period > min_boundary:
        logger.debug("truncated %d chars at sentence boundary %d", len(text), last_period + 1)
        return cut[: last_period + 1]
    logger.debug("truncated %d chars at hard limit %d", len(text), limit)
    return cut


def clean_content(text: str) -> str:
    """Normalise then truncate *text* into Document content."""
    return truncate_text(normalize_text(text))

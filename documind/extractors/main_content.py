"""Boilerplate stripping and main-content selection.

The tree is stripped of chrome (scripts, navigation, ads, ...) in place, then
a fixed priority list of candidate selectors is walked; the first candidate
with enough text wins, and ``<body>`` is the fallback.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from documind import settings
from documind.extractors.tree import element_text, remove_all, select_first

logger = logging.getLogger(__name__)

# Removed before selection; the removal is permanent for the rest of the pipeline
BOILERPLATE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "nav",
    "header",
    "footer",
    "aside",
    ".advertisement",
    ".ads",
)

# Priority CSS selectors (tried in order)
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    "main",
    ".content",
    ".post-content",
    ".entry-content",
    ".article-content",
    ".documentation",
    ".doc-content",
    "body",
)


class ContentSelection(NamedTuple):
    element: Tag
    selector: str  # which candidate won; "body" for the fallback


def strip_boilerplate(soup: BeautifulSoup | Tag) -> int:
    """Remove non-content elements from *soup* in place.  Returns how many were removed."""
    removed = remove_all(soup, BOILERPLATE_SELECTORS)
    logger.debug("stripped %d boilerplate element(s)", removed)
    return removed


def select_content(soup: BeautifulSoup) -> ContentSelection:
    """Pick the subtree most likely to hold the document's substantive content.

    Only the first element matching each selector is considered.  It wins
    when its trimmed text is longer than ``settings.MIN_CONTENT_CHARS``.
    When no candidate qualifies the whole ``<body>`` is returned regardless
    of length (or the whole tree for markup without a body).
    """
    for selector in CONTENT_SELECTORS:
        el = select_first(soup, selector)
        if el is None:
            continue
        if len(element_text(el)) > settings.MIN_CONTENT_CHARS:
            logger.debug("content selector %r matched", selector)
            return ContentSelection(element=el, selector=selector)

    body = soup.find("body")
    logger.debug("no content candidate qualified, falling back to body")
    return ContentSelection(element=body if isinstance(body, Tag) else soup, selector="body")

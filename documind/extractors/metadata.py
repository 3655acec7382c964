"""Document title extraction.

Priority chain (highest -> lowest):
    <title> -> first <h1> -> placeholder
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from documind import settings
from documind.extractors.tree import element_text

logger = logging.getLogger(__name__)


def _first_text(soup: BeautifulSoup, name: str) -> str:
    el = soup.find(name)
    if isinstance(el, Tag):
        return element_text(el)
    return ""


def extract_title(soup: BeautifulSoup) -> str:
    """Return the document title, capped to ``settings.MAX_TITLE_CHARS``.

    Must run before boilerplate stripping: a page whose only ``<h1>`` sits
    in its ``<header>`` still gets that heading as title.
    """
    title = _first_text(soup, "title") or _first_text(soup, "h1") or settings.DEFAULT_TITLE
    return title[: settings.MAX_TITLE_CHARS]

"""Thin helpers over a BeautifulSoup tree.

The pipeline parses markup once with lxml and then queries the same tree
through these helpers.  Besides everything soupsieve understands, selector
patterns may use the wildcard class form ``.prefix-*``, meaning "any element
carrying a class token that starts with ``prefix-``".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, CData, NavigableString, Tag

logger = logging.getLogger(__name__)

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

_WILDCARD_CLASS_RE = re.compile(r"^\.([A-Za-z0-9_-]+)\*$")
_WHITESPACE_RE = re.compile(r"\s+")

# Boundaries of these elements separate words; inline elements join their text
_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "dd", "details", "div",
    "dl", "dt", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "html", "li", "main", "nav", "ol", "p", "pre",
    "section", "summary", "table", "td", "th", "tr", "ul",
})
_BREAK_TAGS = frozenset({"br", "hr"})
# Same string types get_text() collects by default
_TEXT_TYPES = (NavigableString, CData)


def parse_markup(html: str) -> BeautifulSoup:
    """Parse *html* into a tree.  lxml is tolerant, so this never rejects input."""
    return BeautifulSoup(html or "", "lxml")


def class_string(tag: Tag | None) -> str:
    """Return the class attribute of *tag* as a single space-joined string."""
    if tag is None or not isinstance(tag, Tag):
        return ""
    raw = tag.get("class")
    if isinstance(raw, list):
        return " ".join(str(c) for c in raw)
    return str(raw or "")


def _has_class_prefix(prefix: str):
    def _match(tag: Tag) -> bool:
        return any(str(cls).startswith(prefix) for cls in tag.get("class") or [])
    return _match


def select_all(root: Tag, pattern: str) -> list[Tag]:
    """Return every element under *root* matching *pattern*, in document order."""
    m = _WILDCARD_CLASS_RE.match(pattern.strip())
    if m:
        return [el for el in root.find_all(_has_class_prefix(m.group(1))) if isinstance(el, Tag)]
    try:
        return [el for el in root.select(pattern) if isinstance(el, Tag)]
    except Exception as exc:
        logger.debug("CSS selector %r failed: %s", pattern, exc)
        return []


def select_first(root: Tag, pattern: str) -> Tag | None:
    matches = select_all(root, pattern)
    return matches[0] if matches else None


def _enclosing_block(node, root: Tag) -> Tag:
    for parent in node.parents:
        if parent is root or parent.name in _BLOCK_TAGS:
            return parent
    return root


def element_text(tag: Tag) -> str:
    """Return the visible text of *tag* with whitespace runs collapsed.

    Text nodes are concatenated as written, so inline markup such as
    ``un<b>believable</b>`` stays one word.  A space is inserted only where
    the text crosses a block-level element boundary or a ``<br>``.
    """
    parts: list[str] = []
    current: Tag | None = None
    for node in tag.descendants:
        if isinstance(node, Tag):
            if node.name in _BREAK_TAGS:
                parts.append(" ")
            continue
        if type(node) not in _TEXT_TYPES:
            continue
        block = _enclosing_block(node, tag)
        if block is not current:
            parts.append(" ")
            current = block
        parts.append(str(node))
    return _WHITESPACE_RE.sub(" ", "".join(parts)).strip()


def raw_text(tag: Tag) -> str:
    """Return the text of *tag* exactly as written, only trimmed at the ends."""
    return tag.get_text().strip()


def remove_all(root: Tag, patterns: Iterable[str]) -> int:
    """Decompose every element matching any of *patterns*.  Returns the count removed."""
    removed = 0
    for pattern in patterns:
        for el in select_all(root, pattern):
            # A match nested inside an earlier removal is already gone
            if el.decomposed:
                continue
            el.decompose()
            removed += 1
    return removed


def closest(tag: Tag, names: Iterable[str]) -> Tag | None:
    """Return *tag* or its nearest ancestor whose tag name is in *names*."""
    wanted = set(names)
    node: Tag | None = tag
    while node is not None and isinstance(node, Tag):
        if node.name in wanted:
            return node
        node = node.parent
    return None


def is_heading(tag: Tag) -> bool:
    return isinstance(tag, Tag) and tag.name in HEADING_TAGS

"""Build a flat section outline from the heading hierarchy of a subtree."""

from __future__ import annotations

import logging

from bs4 import Tag

from documind import settings
from documind.extractors.tree import HEADING_TAGS, element_text, is_heading
from documind.items import Section

logger = logging.getLogger(__name__)

# Heading tags -> level number
_HEADING_LEVELS: dict[str, int] = {name: int(name[1]) for name in HEADING_TAGS}


def _section_body(heading: Tag) -> str:
    """Join the text of the sibling elements following *heading* up to the next heading."""
    parts: list[str] = []
    for sibling in heading.find_next_siblings():
        if is_heading(sibling):
            break
        text = element_text(sibling)
        if text:
            parts.append(text)
    return " ".join(parts).strip()[: settings.MAX_SECTION_CHARS]


def extract_sections(root: Tag) -> list[Section]:
    """Return one :class:`Section` per heading in *root*, in document order.

    Content stops at the next sibling heading of *any* level, so a parent
    heading directly followed by a sub-heading has no content of its own and
    is dropped.  Headings without text are dropped too.
    """
    sections: list[Section] = []
    for heading in root.find_all(list(HEADING_TAGS)):
        if not isinstance(heading, Tag):
            continue
        title = element_text(heading)
        if not title:
            continue
        body = _section_body(heading)
        if not body:
            continue
        sections.append(Section(heading=title, content=body, level=_HEADING_LEVELS[heading.name]))

    logger.debug("built %d section(s)", len(sections))
    return sections

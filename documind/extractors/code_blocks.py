"""Source-code fragment extraction with language inference.

Runs against the untouched tree, before boilerplate is stripped, so code
living inside elements that are later removed is still collected.

Language is decided by a three-step cascade:

1. ``language-<id>`` / ``lang-<id>`` in the element's class string (or its
   parent's when the element has no class).
2. Well-known abbreviations appearing anywhere in that class string.
3. Content heuristics over the code itself.

Anything left undecided is ``"text"``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from documind import settings
from documind.extractors.tree import class_string, closest, raw_text, select_all
from documind.items import CodeBlock

logger = logging.getLogger(__name__)

# Selector patterns that commonly denote code, tried in order
CODE_SELECTORS: tuple[str, ...] = (
    "pre code",
    "code",
    ".highlight pre",
    ".code-block",
    ".language-*",
    '[class*="language-"]',
    ".hljs",
)

_CONTEXT_CONTAINERS: tuple[str, ...] = ("section", "article", "div")
_CONTEXT_TAGS: list[str] = ["h1", "h2", "h3", "h4", "h5", "h6", "p"]
_FALLBACK_CONTEXT = "Code example"

_LANG_CLASS_RE = re.compile(r"(?:language-|lang-)([a-zA-Z0-9]+)", re.IGNORECASE)

# Substrings of the class string, checked in order
_CLASS_ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    ("js", "javascript"),
    ("ts", "typescript"),
    ("py", "python"),
    ("rb", "ruby"),
    ("sh", "bash"),
    ("yml", "yaml"),
)

# ---------------------------------------------------------------------------
# Content heuristics: (predicate, language), first match wins
# ---------------------------------------------------------------------------

def _matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda code: compiled.search(code) is not None


_JSON_SHAPE_RE = re.compile(r"^\s*\{|\}$")

LANGUAGE_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_matches(r"^import\s+.*from|^const\s+.*=|^function\s+\w+|^class\s+\w+"), "javascript"),
    (_matches(r"^def\s+\w+|^import\s+\w+|^from\s+\w+\s+import"), "python"),
    (_matches(r"^<\?php|^namespace\s+|^class\s+\w+"), "php"),
    (_matches(r"^#include|^int\s+main|^void\s+\w+"), "c"),
    (_matches(r"^public\s+class|^import\s+java"), "java"),
    (_matches(r"^\s*<[^>]+>"), "html"),
    (lambda code: _JSON_SHAPE_RE.search(code) is not None and ":" in code, "json"),
)


def detect_language_from_code(code: str) -> str:
    """Guess the language of *code* from its shape.  Returns ``"text"`` when unsure."""
    sample = code.strip()
    for predicate, language in LANGUAGE_RULES:
        if predicate(sample):
            return language
    return "text"


def language_from_class(class_names: str) -> str | None:
    """Return the language named by a class string, or None if it names none."""
    if not class_names:
        return None
    m = _LANG_CLASS_RE.search(class_names)
    if m:
        return m.group(1).lower()
    for abbreviation, language in _CLASS_ABBREVIATIONS:
        if abbreviation in class_names:
            return language
    return None


def detect_code_language(tag: Tag, code: str) -> str:
    """Decide the language of the fragment held by *tag*."""
    class_names = class_string(tag) or class_string(tag.parent)
    return language_from_class(class_names) or detect_language_from_code(code)


def code_context(tag: Tag) -> str:
    """Return nearby descriptive text for the fragment held by *tag*."""
    container = closest(tag, _CONTEXT_CONTAINERS)
    if container is None:
        return _FALLBACK_CONTEXT
    described = container.find(_CONTEXT_TAGS)
    if not isinstance(described, Tag):
        return _FALLBACK_CONTEXT
    text = raw_text(described)[: settings.MAX_CONTEXT_CHARS]
    return text or _FALLBACK_CONTEXT


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_code_blocks(soup: BeautifulSoup | Tag) -> list[CodeBlock]:
    """Collect deduplicated code fragments from *soup* in selector order.

    A fragment qualifies when its trimmed text is longer than
    ``settings.MIN_CODE_CHARS``.  When the same code text is matched twice,
    by the same selector or by a later one, the first match is kept.
    """
    blocks: list[CodeBlock] = []
    seen: set[str] = set()

    for selector in CODE_SELECTORS:
        for el in select_all(soup, selector):
            code = raw_text(el)
            if len(code) <= settings.MIN_CODE_CHARS or code in seen:
                continue
            seen.add(code)
            blocks.append(
                CodeBlock(
                    language=detect_code_language(el, code),
                    code=code,
                    context=code_context(el),
                    element=selector,
                ),
            )

    logger.debug("extracted %d code block(s)", len(blocks))
    return blocks

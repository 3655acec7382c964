"""Short descriptive tags derived from a document's text and code."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from documind import settings
from documind.items import CodeBlock

# ---------------------------------------------------------------------------
# Topic detectors: (pattern, label), evaluated in order.  Keywords match as
# substrings, so compounds like "OpenAPI" or "OpenAI" count.
# ---------------------------------------------------------------------------

TOPIC_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"api|endpoint|rest|graphql", re.IGNORECASE), "API Documentation"),
    (re.compile(r"tutorial|guide|how.?to|step.?by.?step", re.IGNORECASE), "Tutorial"),
    (re.compile(r"react|vue|angular|javascript|typescript", re.IGNORECASE), "Frontend Development"),
    (re.compile(r"python|java|golang|rust|c\+\+", re.IGNORECASE), "Programming"),
    (re.compile(r"database|sql|mongodb|postgresql", re.IGNORECASE), "Database"),
    (re.compile(r"docker|kubernetes|deployment|devops", re.IGNORECASE), "DevOps"),
    (re.compile(r"machine.?learning|ai|neural.?network", re.IGNORECASE), "AI/ML"),
)


def word_count(text: str) -> int:
    return len(text.split())


def reading_time_minutes(words: int) -> int:
    return math.ceil(words / settings.WORDS_PER_MINUTE)


def detect_topics(content: str, title: str = "") -> list[str]:
    """Return the label of every topic whose pattern matches *content* or *title*."""
    return [
        label
        for pattern, label in TOPIC_RULES
        if pattern.search(content) or pattern.search(title)
    ]


def _distinct_languages(code_blocks: Sequence[CodeBlock]) -> list[str]:
    return list(dict.fromkeys(block.language for block in code_blocks))


def generate_insights(
    content: str,
    title: str,
    code_blocks: Sequence[CodeBlock],
) -> list[str]:
    """Build the ordered insight list and cap it at ``settings.MAX_INSIGHTS``.

    Order: word count, reading time, code example count, code languages,
    then topics.  The cap is a plain slice, so earlier entries always win.
    """
    words = word_count(content)
    insights = [
        f"{words:,} words",
        f"{reading_time_minutes(words)} min read",
    ]

    if code_blocks:
        insights.append(f"{len(code_blocks)} code examples")
        languages = _distinct_languages(code_blocks)
        insights.append(f"Languages: {', '.join(languages[:3])}")

    insights.extend(detect_topics(content, title))
    return insights[: settings.MAX_INSIGHTS]

"""Runtime settings for documind.

Every value can be overridden with a ``DOCUMIND_<NAME>`` environment
variable, read once at import time.
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"DOCUMIND_{name}", "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------
FETCH_TIMEOUT = _env_int("FETCH_TIMEOUT", 30)

# Bodies beyond this size are cut off while reading
MAX_RESPONSE_BYTES = _env_int("MAX_RESPONSE_BYTES", 10 * 1024 * 1024)

USER_AGENT = os.getenv(
    "DOCUMIND_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36",
)

# ---------------------------------------------------------------------------
# Document bounds
# ---------------------------------------------------------------------------
MAX_TITLE_CHARS = _env_int("MAX_TITLE_CHARS", 200)
MAX_CONTENT_CHARS = _env_int("MAX_CONTENT_CHARS", 15000)

# A '.' must sit past this offset to be used as the cut point
SENTENCE_BOUNDARY_MIN = _env_int("SENTENCE_BOUNDARY_MIN", 10000)

MAX_SECTION_CHARS = _env_int("MAX_SECTION_CHARS", 500)
MAX_CONTEXT_CHARS = _env_int("MAX_CONTEXT_CHARS", 100)
MIN_CODE_CHARS = _env_int("MIN_CODE_CHARS", 10)

# Candidate content regions must carry more text than this
MIN_CONTENT_CHARS = _env_int("MIN_CONTENT_CHARS", 100)

# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------
MAX_INSIGHTS = _env_int("MAX_INSIGHTS", 6)
WORDS_PER_MINUTE = _env_int("WORDS_PER_MINUTE", 200)

DEFAULT_TITLE = "Untitled Document"

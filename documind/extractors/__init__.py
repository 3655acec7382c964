"""Extraction sub-package: deterministic HTML -> document building blocks."""

from .code_blocks import detect_language_from_code, extract_code_blocks
from .main_content import select_content, strip_boilerplate
from .metadata import extract_title
from .sections import extract_sections
from .text import clean_content, normalize_text, truncate_text
from .tree import parse_markup

__all__ = [
    "clean_content",
    "detect_language_from_code",
    "extract_code_blocks",
    "extract_sections",
    "extract_title",
    "normalize_text",
    "parse_markup",
    "select_content",
    "strip_boilerplate",
    "truncate_text",
]

"""Tests for documind.extractors.code_blocks."""

from __future__ import annotations

import pytest

from documind.extractors.code_blocks import (
    detect_language_from_code,
    extract_code_blocks,
    language_from_class,
)
from documind.extractors.tree import parse_markup


def _blocks(html: str):
    return extract_code_blocks(parse_markup(html))


# ---------------------------------------------------------------------------
# Content heuristics
# ---------------------------------------------------------------------------

class TestDetectLanguageFromCode:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("import React from 'react'\nconst x = 1", "javascript"),
            ("function greet(name) { return name; }", "javascript"),
            ("def main():\n    return 1", "python"),
            ("import os\nprint(os.getcwd())", "python"),
            ("from pathlib import Path", "python"),
            ("<?php echo 'hello'; ?>", "php"),
            ("namespace App\\Http;", "php"),
            ("#include <stdio.h>\nint main() {}", "c"),
            ("void setup() { pinMode(13, OUTPUT); }", "c"),
            ("public class Main { }", "java"),
            ("<div class=\"card\">Hello</div>", "html"),
            ('{"name": "demo", "version": 1}', "json"),
            ("just some plain words here", "text"),
        ],
    )
    def test_rules(self, code, expected):
        assert detect_language_from_code(code) == expected

    def test_javascript_wins_over_php_for_class(self):
        # Both rules accept a leading "class X"; javascript is earlier
        assert detect_language_from_code("class Widget extends Base {}") == "javascript"

    def test_leading_whitespace_ignored(self):
        assert detect_language_from_code("\n\n   def run():\n    pass") == "python"

    def test_braces_without_colon_are_not_json(self):
        assert detect_language_from_code("{ nothing to see }") == "text"


class TestLanguageFromClass:
    def test_language_prefix_lowercased(self):
        assert language_from_class("language-Python") == "python"

    def test_lang_prefix(self):
        assert language_from_class("highlight lang-ruby") == "ruby"

    def test_abbreviation(self):
        assert language_from_class("sh") == "bash"
        assert language_from_class("src-yml") == "yaml"

    def test_no_hint(self):
        assert language_from_class("highlight") is None
        assert language_from_class("") is None


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

class TestExtractCodeBlocks:
    def test_language_class_on_code(self):
        blocks = _blocks('<pre><code class="language-python">def run():\n    pass</code></pre>')
        assert len(blocks) == 1
        assert blocks[0].language == "python"
        assert blocks[0].element == "pre code"

    def test_code_kept_verbatim(self):
        blocks = _blocks('<pre><code class="language-python">def run():\n    pass</code></pre>')
        assert blocks[0].code == "def run():\n    pass"

    def test_parent_class_used_when_element_has_none(self):
        blocks = _blocks('<pre class="lang-ruby"><code>puts "hello world"</code></pre>')
        assert blocks[0].language == "ruby"

    def test_heuristic_when_no_class_hint(self):
        blocks = _blocks("<pre><code>import React from 'react'\nconst x = 1</code></pre>")
        assert blocks[0].language == "javascript"

    def test_unknown_language_is_text(self):
        blocks = _blocks("<pre><code>just some plain words here</code></pre>")
        assert blocks[0].language == "text"

    def test_short_fragments_skipped(self):
        assert _blocks("<p>Set <code>x = 1</code> first.</p>") == []

    def test_exactly_ten_chars_skipped(self):
        assert _blocks("<pre><code>0123456789</code></pre>") == []

    def test_duplicate_across_selectors_kept_once(self):
        html = (
            '<pre><code>echo "same snippet"</code></pre>'
            '<div class="code-block">echo "same snippet"</div>'
        )
        blocks = _blocks(html)
        assert len(blocks) == 1
        assert blocks[0].element == "pre code"

    def test_distinct_fragments_in_document_order(self):
        html = (
            "<pre><code>def first():\n    pass</code></pre>"
            "<pre><code>def second():\n    pass</code></pre>"
        )
        codes = [b.code for b in _blocks(html)]
        assert codes == ["def first():\n    pass", "def second():\n    pass"]

    def test_wildcard_language_class(self):
        blocks = _blocks('<div class="language-go">package main\nfunc main() {}</div>')
        assert len(blocks) == 1
        assert blocks[0].element == ".language-*"
        assert blocks[0].language == "go"

    def test_highlight_pre(self):
        blocks = _blocks('<div class="highlight"><pre>SELECT * FROM users;</pre></div>')
        assert blocks[0].element == ".highlight pre"
        assert blocks[0].context == "Code example"

    def test_codes_are_unique_and_long_enough(self):
        html = (
            "<pre><code>def a():\n    return 1</code></pre>"
            "<code>def a():\n    return 1</code>"
            '<div class="hljs">def a():\n    return 1</div>'
            "<code>tiny</code>"
        )
        blocks = _blocks(html)
        codes = [b.code for b in blocks]
        assert len(codes) == len(set(codes))
        assert all(len(c.strip()) > 10 for c in codes)


class TestCodeContext:
    def test_nearest_section_heading(self):
        html = (
            "<section><h2>Setup</h2><p>Run this first.</p>"
            "<pre><code>pip install documind</code></pre></section>"
        )
        assert _blocks(html)[0].context == "Setup"

    def test_paragraph_when_no_heading(self):
        html = (
            "<div><p>Install the package with pip.</p>"
            "<pre><code>pip install documind</code></pre></div>"
        )
        assert _blocks(html)[0].context == "Install the package with pip."

    def test_context_capped(self):
        html = (
            f"<div><p>{'x' * 150}</p>"
            "<pre><code>pip install documind</code></pre></div>"
        )
        assert _blocks(html)[0].context == "x" * 100

    def test_fallback_label(self):
        html = "<body><pre><code>pip install documind</code></pre></body>"
        assert _blocks(html)[0].context == "Code example"

    def test_container_without_text_falls_back(self):
        html = "<div><pre><code>pip install documind</code></pre></div>"
        assert _blocks(html)[0].context == "Code example"

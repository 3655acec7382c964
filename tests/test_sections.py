"""Tests for documind.extractors.sections."""

from __future__ import annotations

from documind.extractors.sections import extract_sections
from documind.extractors.tree import parse_markup


def _sections(html: str):
    soup = parse_markup(html)
    return extract_sections(soup.find("body") or soup)


class TestExtractSections:
    def test_heading_with_following_paragraphs(self):
        sections = _sections("<h2>Setup</h2><p>Install it.</p><p>Then run it.</p>")
        assert len(sections) == 1
        assert sections[0].heading == "Setup"
        assert sections[0].content == "Install it. Then run it."
        assert sections[0].level == 2

    def test_document_order_and_levels(self):
        sections = _sections(
            "<h1>Guide</h1><p>Intro.</p>"
            "<h3>Detail</h3><p>Deep.</p>"
            "<h2>Next</h2><p>More.</p>",
        )
        assert [(s.heading, s.level) for s in sections] == [
            ("Guide", 1), ("Detail", 3), ("Next", 2),
        ]

    def test_content_stops_at_any_heading(self):
        sections = _sections("<h2>A</h2><p>one</p><h4>B</h4><p>two</p><p>three</p>")
        assert sections[0].content == "one"
        assert sections[1].content == "two three"

    def test_heading_followed_by_heading_dropped(self):
        sections = _sections("<h1>Parent</h1><h2>Child</h2><p>Body.</p>")
        assert [s.heading for s in sections] == ["Child"]

    def test_empty_heading_dropped(self):
        sections = _sections("<h2>  </h2><p>Orphan text.</p><h2>Real</h2><p>Body.</p>")
        assert [s.heading for s in sections] == ["Real"]

    def test_empty_siblings_ignored(self):
        sections = _sections("<h2>Blank</h2><div>  </div><p></p>")
        assert sections == []

    def test_content_capped(self):
        sections = _sections(f"<h2>Long</h2><p>{'word ' * 300}</p>")
        assert len(sections[0].content) == 500

    def test_nested_headings_use_their_own_siblings(self):
        sections = _sections(
            "<div><h2>Inside</h2><p>Nested body.</p></div><p>Outside.</p>",
        )
        assert sections[0].content == "Nested body."

    def test_no_headings(self):
        assert _sections("<p>Just text.</p>") == []

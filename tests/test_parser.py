"""Tests for documind.parser - DocumentParser high-level class."""

from __future__ import annotations

from unittest.mock import patch

from documind.items import Document, ErrorResponse, ParseResponse
from documind.parser import DocumentParser

URL = "https://example.com/docs/install"


def _make_document(**kwargs) -> Document:
    defaults = {"title": "Install Guide", "url": URL}
    defaults.update(kwargs)
    return Document(**defaults)


class TestDocumentParserInit:
    def test_defaults(self):
        parser = DocumentParser()
        assert parser._timeout is None
        assert parser._user_agent is None

    def test_custom(self):
        parser = DocumentParser(timeout=10, user_agent="TestAgent/1.0")
        assert parser._timeout == 10
        assert parser._user_agent == "TestAgent/1.0"


class TestDocumentParserFetch:
    def test_returns_document(self):
        doc = _make_document()
        with patch("documind.parser._fetch", return_value=doc) as mock_fetch:
            result = DocumentParser().fetch(URL)
        assert result is doc
        mock_fetch.assert_called_once_with(URL, timeout=None, user_agent=None)

    def test_forwards_settings(self):
        with patch("documind.parser._fetch", return_value=_make_document()) as mock_fetch:
            DocumentParser(timeout=5, user_agent="UA").fetch(URL)
        mock_fetch.assert_called_once_with(URL, timeout=5, user_agent="UA")


class TestDocumentParserParse:
    def test_no_network(self):
        with patch("documind.parser._fetch") as mock_fetch:
            doc = DocumentParser().parse("<html><head><title>Local</title></head></html>", url=URL)
        mock_fetch.assert_not_called()
        assert doc.title == "Local"
        assert doc.url == URL


class TestDocumentParserHandle:
    def test_forwards_payload(self):
        response = ParseResponse(status=400, error=ErrorResponse(error="URL is required"))
        with patch("documind.parser._handle", return_value=response) as mock_handle:
            result = DocumentParser(timeout=7).handle({})
        assert result is response
        mock_handle.assert_called_once_with({}, timeout=7, user_agent=None)

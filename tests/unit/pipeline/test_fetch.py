"""
test_fetch.py
-------------
Tests for fetching the theme list page and extracting its lines.

HTTP is mocked; no test touches the network.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from weekthemes.core.exceptions import FetchError
from weekthemes.pipeline.fetch import extract_lines, fetch_html


def _response(status=200, text=""):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.text = text
    return response


class TestFetchHtml:
    """Tests for fetch_html()."""

    @patch("weekthemes.pipeline.fetch.requests.get")
    def test_returns_body(self, mock_get):
        mock_get.return_value = _response(text="<html></html>")
        assert fetch_html("https://example.org", user_agent="ua", timeout=3) == "<html></html>"
        mock_get.assert_called_once_with(
            "https://example.org", headers={"User-Agent": "ua"}, timeout=3
        )

    @patch("weekthemes.pipeline.fetch.requests.get")
    def test_http_error_status(self, mock_get):
        mock_get.return_value = _response(status=503)
        with pytest.raises(FetchError, match="503"):
            fetch_html("https://example.org")

    @patch("weekthemes.pipeline.fetch.requests.get")
    def test_transport_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("no route")
        with pytest.raises(FetchError, match="no route"):
            fetch_html("https://example.org")


class TestExtractLines:
    """Tests for extract_lines()."""

    def test_article_lines(self, article_html):
        assert extract_lines(article_html) == [
            "Themes for the coming months are below.",
            "September 2025",
            "1st: Cover art",
            "8th – Love",
            "15th June – Cover",
            "22nd: Poison",
            "October 2025",
            "6th - Trains",
        ]

    def test_content_outside_article(self):
        html = '<div class="entry-content"><p>1st: Cover art</p></div>'
        assert extract_lines(html) == ["1st: Cover art"]

    def test_article_block_preferred(self):
        html = (
            '<div class="entry-content"><p>sidebar</p></div>'
            '<article><div class="entry-content"><p>main</p></div></article>'
        )
        assert extract_lines(html) == ["main"]

    def test_missing_content_block(self):
        with pytest.raises(FetchError, match="entry-content"):
            extract_lines("<html><body><p>1st: x</p></body></html>")

    def test_curly_quotes_kept(self):
        html = '<div class="entry-content"><p>1st: “Locked” room’s</p></div>'
        assert extract_lines(html) == ["1st: “Locked” room’s"]

"""Tests for HTML output and the trending digest."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

from autoblog.digest import build_digest, build_digest_html, generator_link
from autoblog.models import FinalDocument
from autoblog.render import compose_fragment, compose_html


def _document(**kwargs) -> FinalDocument:
    values = {
        "title": "AI & 반도체",
        "body_with_references": "<p>refs</p>",
        "tags": ("AI", "반도체"),
    }
    values.update(kwargs)
    return FinalDocument(**values)


class TestComposeHtml:
    def test_standalone_page(self) -> None:
        page = compose_html(_document())

        assert page.startswith("<!DOCTYPE html>")
        assert '<html lang="ko">' in page
        assert "<title>AI &amp; 반도체</title>" in page
        assert "<h1>AI &amp; 반도체</h1>" in page
        assert "<p>refs</p>" in page
        assert '<p class="tags">AI, 반도체</p>' in page

    def test_prefers_body_with_media(self) -> None:
        page = compose_html(_document(body_with_media="<p>media</p>"))

        assert "<p>media</p>" in page
        assert "<p>refs</p>" not in page

    def test_fragment(self) -> None:
        assert compose_fragment(_document()) == "<h1>AI &amp; 반도체</h1>\n<p>refs</p>"


class TestDigest:
    def test_link_encoding(self) -> None:
        assert generator_link("http://x/", "AI 칩") == "http://x/?keyword=AI%20%EC%B9%A9&auto=true"

    def test_digest_lists_titles(self) -> None:
        markup = build_digest_html("AI Trends", ["One", "Two <b>"], "https://blog.test")

        assert "Daily Blog Ideas: AI Trends" in markup
        assert "1. One</a>" in markup
        assert "2. Two &lt;b&gt;</a>" in markup
        assert 'href="https://blog.test/?keyword=One&amp;auto=true"' in markup

    def test_no_titles_gives_empty_digest(self) -> None:
        generator = MagicMock()
        generator.trending_titles = AsyncMock(return_value=[])

        assert asyncio.run(build_digest(generator, "AI", "https://blog.test")) == ""

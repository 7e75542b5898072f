"""Tests for the Gemini generation wrapper."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from autoblog.generator import (
    ERROR_PREFIX,
    GeminiGenerator,
    extract_citation_chunks,
    parse_title_list,
)
from autoblog.models import CitationChunk, GenerationError


def _response(text, chunks=()):
    grounding_chunks = [
        SimpleNamespace(web=SimpleNamespace(uri=uri, title=title)) for uri, title in chunks
    ]
    candidate = SimpleNamespace(
        grounding_metadata=SimpleNamespace(grounding_chunks=grounding_chunks)
    )
    return SimpleNamespace(text=text, candidates=[candidate])


def _generator(response=None, error=None) -> GeminiGenerator:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return GeminiGenerator("gemini-test", api_key="key", client=client)


class TestCitationChunks:
    def test_reads_web_chunks(self) -> None:
        response = _response("x", [("https://g/1", "yna.co.kr"), ("https://g/2", None)])

        assert extract_citation_chunks(response) == (
            CitationChunk(url="https://g/1", label="yna.co.kr"),
            CitationChunk(url="https://g/2", label=""),
        )

    def test_skips_non_web_chunks(self) -> None:
        candidate = SimpleNamespace(
            grounding_metadata=SimpleNamespace(grounding_chunks=[SimpleNamespace(web=None)])
        )

        assert extract_citation_chunks(SimpleNamespace(candidates=[candidate])) == ()

    def test_missing_metadata(self) -> None:
        assert extract_citation_chunks(SimpleNamespace(candidates=None)) == ()
        candidate = SimpleNamespace(grounding_metadata=None)
        assert extract_citation_chunks(SimpleNamespace(candidates=[candidate])) == ()


class TestGenerate:
    def test_returns_text_and_chunks(self) -> None:
        generator = _generator(_response("[TITLE]t[/TITLE]", [("https://g/1", "yna.co.kr")]))

        result = asyncio.run(generator.generate("prompt"))

        assert result.text == "[TITLE]t[/TITLE]"
        assert result.citation_chunks == (CitationChunk("https://g/1", "yna.co.kr"),)
        call = generator._client.aio.models.generate_content.await_args
        assert call.kwargs["model"] == "gemini-test"
        assert call.kwargs["contents"] == "prompt"

    def test_none_text_becomes_empty(self) -> None:
        generator = _generator(_response(None))

        assert asyncio.run(generator.generate("prompt")).text == ""

    def test_failure_is_wrapped(self) -> None:
        generator = _generator(error=RuntimeError("quota exceeded"))

        with pytest.raises(GenerationError) as excinfo:
            asyncio.run(generator.generate("prompt"))

        assert str(excinfo.value) == f"{ERROR_PREFIX}quota exceeded"
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_trending_titles(self) -> None:
        generator = _generator(_response('```json\n["One", " ", "Two"]\n```'))

        assert asyncio.run(generator.trending_titles("AI")) == ["One", "Two"]


class TestParseTitleList:
    def test_plain_json(self) -> None:
        assert parse_title_list('["A", "B"]') == ["A", "B"]

    def test_invalid_json(self) -> None:
        assert parse_title_list("not json") == []

    def test_not_a_list(self) -> None:
        assert parse_title_list('{"a": 1}') == []

    def test_empty(self) -> None:
        assert parse_title_list("") == []

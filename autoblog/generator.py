"""Gemini-backed text generation with Google Search grounding."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, List, Optional, Tuple

from google import genai
from google.genai import types

from .config import DEFAULT_MODEL_ID
from .models import CitationChunk, GenerationError, RawModelResponse
from .prompts import build_trending_prompt
from .utils import strip_code_fence

logger = logging.getLogger("autoblog")

ERROR_PREFIX = "블로그 글 생성 중 오류 발생: "


def extract_citation_chunks(response: Any) -> Tuple[CitationChunk, ...]:
    """Read ``(url, label)`` pairs from the grounding metadata of a response."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ()
    metadata = getattr(candidates[0], "grounding_metadata", None)
    grounding_chunks = getattr(metadata, "grounding_chunks", None) or []

    chunks: List[CitationChunk] = []
    for grounding_chunk in grounding_chunks:
        web = getattr(grounding_chunk, "web", None)
        if web is None:
            continue
        url = getattr(web, "uri", None) or ""
        label = getattr(web, "title", None) or getattr(web, "domain", None) or ""
        chunks.append(CitationChunk(url=url, label=label))
    return tuple(chunks)


class GeminiGenerator:
    """Thin wrapper around the Gemini API for grounded post generation."""

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        api_key: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.model_id = model_id
        self.api_key = api_key
        self._client: Any = client

    def _ensure_client(self) -> Any:
        if self._client is None:
            logger.debug("Creating Gemini client for model %s", self.model_id)
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _search_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )

    async def _generate_content(self, prompt: str) -> Any:
        client = self._ensure_client()
        return await client.aio.models.generate_content(
            model=self.model_id,
            contents=prompt,
            config=self._search_config(),
        )

    async def generate(self, prompt: str) -> RawModelResponse:
        """Run the prompt and return the raw text plus citation chunks."""
        start = time.perf_counter()
        try:
            response = await self._generate_content(prompt)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Error generating blog post with Gemini")
            raise GenerationError(f"{ERROR_PREFIX}{exc}") from exc

        text = getattr(response, "text", None) or ""
        chunks = extract_citation_chunks(response)
        logger.info(
            "Gemini returned %d chars and %d citation chunk(s) in %.2fs",
            len(text),
            len(chunks),
            time.perf_counter() - start,
        )
        return RawModelResponse(text=text, citation_chunks=chunks)

    async def trending_titles(self, topic: str) -> List[str]:
        """Ask the model for trending headlines about ``topic``."""
        response = await self.generate(build_trending_prompt(topic))
        return parse_title_list(response.text)


def parse_title_list(text: str) -> List[str]:
    """Parse a JSON array of headline strings, tolerating code fences."""
    if not text:
        return []
    try:
        payload = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse JSON title list from Gemini: %s", exc)
        return []
    if not isinstance(payload, list):
        logger.error("Expected a JSON array of titles, got %s", type(payload).__name__)
        return []
    return [str(item).strip() for item in payload if str(item).strip()]

"""High-level orchestration from a request to a finished post."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, Tuple

from .citations import append_references
from .images import ImageSearcher, find_media
from .media import inject_media
from .models import FinalDocument, GenerationRequest, RawModelResponse
from .prompts import build_prompt
from .sections import extract_sections
from .titles import resolve_title

logger = logging.getLogger("autoblog")


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> RawModelResponse:
        ...


def build_document(response: RawModelResponse, keyword: str) -> FinalDocument:
    """Turn a raw model response into a document with a references section."""
    sections = extract_sections(response.text, keyword)
    title = sections.title
    if not title:
        title = resolve_title(sections.body, response.text, keyword)

    body = append_references(sections.body, sections.source_titles, response.citation_chunks)
    return FinalDocument(
        title=title,
        body_with_references=body,
        tags=sections.tags,
        image_keywords=sections.image_keywords,
    )


async def generate_post(request: GenerationRequest, generator: TextGenerator) -> FinalDocument:
    """Render the prompt, wait for the model and assemble the document."""
    logger.info(
        "Generating post for %r (range=%s, template=%s)",
        request.keyword,
        request.date_range.value,
        request.template.value,
    )
    response = await generator.generate(build_prompt(request))
    return build_document(response, request.keyword)


def attach_media(
    document: FinalDocument,
    searcher: ImageSearcher,
    keyword: str,
    keywords: Optional[Sequence[str]] = None,
    count: int = 3,
) -> Tuple[FinalDocument, bool]:
    """Search images and return a new document with figures placed in the body.

    Always starts from ``body_with_references`` so calling it again
    regenerates media instead of stacking figures.
    """
    if keywords is None:
        keywords = document.image_keywords
    assets = find_media(searcher, keywords, keyword, count=count)
    injection = inject_media(document.body_with_references, assets, keyword)
    if not injection.images_found:
        return document.with_media(None), False
    return document.with_media(injection.body), True

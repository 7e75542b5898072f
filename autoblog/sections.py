"""Marker-based section extraction for raw model output."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from .models import ExtractedSections

logger = logging.getLogger("autoblog")

SECTION_NAMES = ("TITLE", "POST", "TAGS", "IMAGE_KEYWORDS", "SOURCES")
MAX_TAGS = 10

FAILED_POST_PLACEHOLDER = (
    "<p>블로그 본문을 생성하는 데 실패했습니다. AI가 예상치 못한 형식으로 응답했을 수 있습니다. "
    "다른 키워드나 옵션으로 다시 시도해 보세요.</p>"
)

_SECTION_PATTERNS: Dict[str, Pattern[str]] = {
    name: re.compile(rf"\[{name}\](.*?)\[/{name}\]", re.DOTALL) for name in SECTION_NAMES
}
# Spans removed when the body has to be recovered from unlabeled text.
# POST is only recovered when empty, so dropping its span removes bare markers.
_RECOVERY_STRIP = ("TITLE", "TAGS", "IMAGE_KEYWORDS", "SOURCES", "POST")
_BULLET_PATTERN = re.compile(r"^\s*(?:[-•*]|\d+\.)\s+")


def find_section(text: str, name: str) -> Optional[str]:
    """Return the trimmed contents of the first ``[NAME]...[/NAME]`` pair, or ``None``."""
    match = _SECTION_PATTERNS[name].search(text)
    if match is None:
        return None
    return match.group(1).strip()


def normalize_list(raw: str, limit: Optional[int] = None) -> Tuple[str, ...]:
    """Split a comma separated field, trimming items and dropping blanks."""
    items = [item.strip() for item in raw.split(",")]
    items = [item for item in items if item]
    if limit is not None:
        items = items[:limit]
    return tuple(items)


def parse_source_lines(raw: str) -> Tuple[str, ...]:
    """Split the SOURCES block into titles, removing bullets and numbering."""
    titles: List[str] = []
    for line in raw.splitlines():
        cleaned = _BULLET_PATTERN.sub("", line).strip()
        if cleaned:
            titles.append(cleaned)
    return tuple(titles)


def strip_sections(text: str, names: Iterable[str]) -> str:
    """Remove the first ``[NAME]...[/NAME]`` span for each of ``names``."""
    remainder = text
    for name in names:
        remainder = _SECTION_PATTERNS[name].sub("", remainder, count=1)
    return remainder


def recover_body(text: str) -> str:
    """Strip labeled metadata spans and return whatever content remains."""
    return strip_sections(text, _RECOVERY_STRIP).strip()


def extract_sections(text: str, keyword: str) -> ExtractedSections:
    """Split raw model text into named sections, degrading instead of failing."""
    found: Dict[str, str] = {}
    for name in SECTION_NAMES:
        value = find_section(text, name)
        if value is not None:
            found[name] = value

    markers = frozenset(found)
    tags = normalize_list(found.get("TAGS", ""), limit=MAX_TAGS)
    image_keywords = normalize_list(found.get("IMAGE_KEYWORDS", ""))
    source_titles = parse_source_lines(found.get("SOURCES", ""))

    if not markers & {"TITLE", "POST", "TAGS"}:
        logger.warning("Model response has no section markers; using raw text as the post body")
        return ExtractedSections(
            title=keyword,
            body=text,
            tags=tags,
            image_keywords=image_keywords,
            source_titles=source_titles,
            markers=markers,
        )

    body = found.get("POST", "")
    if not body:
        logger.info("POST section missing or empty; recovering body from unlabeled text")
        body = recover_body(text)
        if not body:
            logger.warning("No post body could be recovered from the model response")
            body = FAILED_POST_PLACEHOLDER

    return ExtractedSections(
        title=found.get("TITLE", ""),
        body=body,
        tags=tags,
        image_keywords=image_keywords,
        source_titles=source_titles,
        markers=markers,
    )

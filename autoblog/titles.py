"""Title resolution cascade for posts whose TITLE section is missing."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence, Tuple

from .sections import strip_sections
from .utils import strip_tags

logger = logging.getLogger("autoblog")

MIN_LINE_TITLE_CHARS = 10
MAX_LINE_TITLE_CHARS = 150

_HEADING_PATTERNS = (
    re.compile(r"<h1\b[^>]*>(.*?)</h1>", re.IGNORECASE | re.DOTALL),
    re.compile(r"<h2\b[^>]*>(.*?)</h2>", re.IGNORECASE | re.DOTALL),
)
_BARE_MARKER = re.compile(r"^\[/?[A-Za-z_]+\]$")
# Metadata blocks whose lines are never title candidates.
_NON_TITLE_SECTIONS = ("TAGS", "IMAGE_KEYWORDS", "SOURCES")

# (name, indicator words, template); checked in order, first hit wins.
TITLE_TEMPLATES: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("default", (), "{keyword}: 최신 뉴스로 살펴본 핵심 동향 총정리"),
    (
        "investment",
        ("투자", "주식", "증시", "시장", "금리", "수익", "investment", "market", "stock"),
        "{keyword} 투자 전략: 지금 주목해야 할 시장 포인트",
    ),
    (
        "technology",
        ("기술", "혁신", "인공지능", "반도체", "technology", "innovation", "AI"),
        "{keyword}, 기술 혁신이 바꾸는 미래",
    ),
    (
        "review",
        ("리뷰", "장점", "단점", "후기", "review", "pros", "cons"),
        "{keyword} 리뷰: 장점과 단점 솔직 분석",
    ),
)

TitleStrategy = Callable[[str, str, str], Optional[str]]


def title_from_headings(body: str, raw_text: str, keyword: str) -> Optional[str]:
    """Use the first non-empty ``<h1>``, then ``<h2>``, of the body."""
    for pattern in _HEADING_PATTERNS:
        match = pattern.search(body)
        if match:
            text = strip_tags(match.group(1))
            if text:
                return text
    return None


def title_from_lines(body: str, raw_text: str, keyword: str) -> Optional[str]:
    """Pick the first free-standing raw line with a plausible title length."""
    for line in strip_sections(raw_text, _NON_TITLE_SECTIONS).splitlines():
        candidate = line.strip()
        if not candidate or _BARE_MARKER.match(candidate) or candidate.startswith("<"):
            continue
        text = strip_tags(candidate)
        if MIN_LINE_TITLE_CHARS <= len(text) <= MAX_LINE_TITLE_CHARS:
            return text
    return None


def _indicator_matcher(word: str) -> Callable[[str], bool]:
    # Latin words must stand alone; uppercase acronyms such as "AI" keep their case.
    if not word.isascii():
        return lambda text: word in text
    flags = 0 if word.isupper() else re.IGNORECASE
    pattern = re.compile(rf"(?<![A-Za-z]){re.escape(word)}(?![A-Za-z])", flags)
    return lambda text: pattern.search(text) is not None


_TOPIC_MATCHERS: Tuple[Tuple[str, Tuple[Callable[[str], bool], ...]], ...] = tuple(
    (name, tuple(_indicator_matcher(word) for word in indicators))
    for name, indicators, _ in TITLE_TEMPLATES[1:]
)


def classify_topic(plain_text: str) -> str:
    """Return the name of the first template whose indicator words appear."""
    for name, matchers in _TOPIC_MATCHERS:
        if any(matches(plain_text) for matches in matchers):
            return name
    return TITLE_TEMPLATES[0][0]


def synthesize_title(body: str, raw_text: str, keyword: str) -> str:
    """Fill a fixed title template with the keyword. Never returns empty."""
    topic = classify_topic(strip_tags(body))
    for name, _, template in TITLE_TEMPLATES:
        if name == topic:
            return template.format(keyword=keyword.strip()).strip()
    return TITLE_TEMPLATES[0][2].format(keyword=keyword.strip()).strip()


TITLE_STRATEGIES: Sequence[Tuple[str, TitleStrategy]] = (
    ("headings", title_from_headings),
    ("lines", title_from_lines),
    ("template", synthesize_title),
)


def resolve_title(
    body: str,
    raw_text: str,
    keyword: str,
    strategies: Sequence[Tuple[str, TitleStrategy]] = TITLE_STRATEGIES,
) -> str:
    """Run the title strategies in order and return the first non-empty result."""
    for name, strategy in strategies:
        title = strategy(body, raw_text, keyword)
        if title:
            logger.debug("Resolved title via %s strategy", name)
            return title
    return synthesize_title(body, raw_text, keyword)

"""Match model-reported source titles against grounding citation chunks."""

from __future__ import annotations

import html
import logging
import re
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .models import CitationCandidate, CitationChunk, ResolvedSource

logger = logging.getLogger("autoblog")

MAX_SOURCES = 5
REFERENCES_HEADING = "참고 자료"

_OUTLET_SEPARATOR = re.compile(r"\s[-–—]\s")

# Outlet names and common abbreviations mapped to the domains they publish on.
_OUTLETS = {
    "연합뉴스": ("yna.co.kr",),
    "연합": ("yna.co.kr",),
    "yonhap": ("yna.co.kr", "en.yna.co.kr"),
    "yonhap news agency": ("yna.co.kr", "en.yna.co.kr"),
    "연합뉴스tv": ("yonhapnewstv.co.kr",),
    "뉴시스": ("newsis.com",),
    "뉴스1": ("news1.kr",),
    "조선일보": ("chosun.com",),
    "조선비즈": ("biz.chosun.com", "chosun.com"),
    "중앙일보": ("joongang.co.kr",),
    "동아일보": ("donga.com",),
    "동아사이언스": ("dongascience.com",),
    "한겨레": ("hani.co.kr",),
    "경향신문": ("khan.co.kr",),
    "한국일보": ("hankookilbo.com",),
    "국민일보": ("kmib.co.kr",),
    "서울신문": ("seoul.co.kr",),
    "세계일보": ("segye.com",),
    "문화일보": ("munhwa.com",),
    "매일경제": ("mk.co.kr",),
    "매경": ("mk.co.kr",),
    "한국경제": ("hankyung.com",),
    "한경": ("hankyung.com",),
    "서울경제": ("sedaily.com",),
    "머니투데이": ("mt.co.kr",),
    "이데일리": ("edaily.co.kr",),
    "아시아경제": ("asiae.co.kr",),
    "헤럴드경제": ("heraldcorp.com",),
    "파이낸셜뉴스": ("fnnews.com",),
    "전자신문": ("etnews.com",),
    "디지털타임스": ("dt.co.kr",),
    "zdnet korea": ("zdnet.co.kr",),
    "지디넷코리아": ("zdnet.co.kr",),
    "블로터": ("bloter.net",),
    "kbs": ("kbs.co.kr",),
    "kbs뉴스": ("kbs.co.kr",),
    "mbc": ("imbc.com",),
    "mbc뉴스": ("imbc.com",),
    "sbs": ("sbs.co.kr",),
    "sbs뉴스": ("sbs.co.kr",),
    "jtbc": ("jtbc.co.kr", "joongang.co.kr"),
    "ytn": ("ytn.co.kr",),
    "mbn": ("mbn.co.kr",),
    "reuters": ("reuters.com",),
    "bloomberg": ("bloomberg.com",),
    "cnbc": ("cnbc.com",),
    "cnn": ("cnn.com",),
    "bbc": ("bbc.com", "bbc.co.uk"),
    "bbc news": ("bbc.com", "bbc.co.uk"),
    "the verge": ("theverge.com",),
    "techcrunch": ("techcrunch.com",),
    "the new york times": ("nytimes.com",),
    "nyt": ("nytimes.com",),
    "the wall street journal": ("wsj.com",),
    "wsj": ("wsj.com",),
    "financial times": ("ft.com",),
    "ft": ("ft.com",),
    "forbes": ("forbes.com",),
    "the guardian": ("theguardian.com",),
}

OUTLET_DOMAINS: Mapping[str, Tuple[str, ...]] = MappingProxyType(_OUTLETS)

MatchStrategy = Callable[[int, Tuple[str, ...], List[CitationCandidate]], Optional[CitationCandidate]]


def _normalize_outlet(name: str) -> str:
    return " ".join(name.split()).casefold()


def extract_outlet_name(source_title: str) -> Optional[str]:
    """Return the publisher name after the last dash separator, if any."""
    separators = list(_OUTLET_SEPARATOR.finditer(source_title))
    if not separators:
        return None
    outlet = source_title[separators[-1].end():].strip()
    return outlet or None


def expected_domains(outlet: Optional[str]) -> Tuple[str, ...]:
    if not outlet:
        return ()
    return OUTLET_DOMAINS.get(_normalize_outlet(outlet), ())


def match_by_domain(
    index: int,
    domains: Tuple[str, ...],
    pool: List[CitationCandidate],
) -> Optional[CitationCandidate]:
    """First unconsumed chunk whose label and an expected domain contain one another."""
    if not domains:
        return None
    for candidate in pool:
        if candidate.used:
            continue
        label = candidate.chunk.label.strip().casefold()
        if not label:
            continue
        for domain in domains:
            if domain in label or label in domain:
                return candidate
    return None


def match_by_position(
    index: int,
    domains: Tuple[str, ...],
    pool: List[CitationCandidate],
) -> Optional[CitationCandidate]:
    """Chunk at the same position as the source title, if still unconsumed."""
    if index < len(pool) and not pool[index].used:
        return pool[index]
    return None


MATCH_STRATEGIES: Sequence[Tuple[str, MatchStrategy]] = (
    ("domain", match_by_domain),
    ("position", match_by_position),
)


def resolve_citations(
    source_titles: Sequence[str],
    chunks: Sequence[CitationChunk],
) -> List[ResolvedSource]:
    """Bind each source title (at most five) to a citation URL where possible."""
    if not source_titles or not chunks:
        return []

    pool = [CitationCandidate(chunk) for chunk in chunks]
    resolved: List[ResolvedSource] = []
    for index, title in enumerate(source_titles[:MAX_SOURCES]):
        domains = expected_domains(extract_outlet_name(title))
        entry = ResolvedSource(title=title)
        for name, strategy in MATCH_STRATEGIES:
            candidate = strategy(index, domains, pool)
            if candidate is None:
                continue
            candidate.used = True
            if candidate.chunk.url:
                entry.url = candidate.chunk.url
                entry.strategy = name
            break
        if entry.url is None:
            logger.debug("No citation URL found for source %r", title)
        resolved.append(entry)
    return resolved


def build_references_html(sources: Sequence[ResolvedSource]) -> str:
    """Render resolved sources as the fixed-heading reference list."""
    items: List[str] = []
    for source in sources:
        label = html.escape(source.title)
        if source.url:
            href = html.escape(source.url, quote=True)
            items.append(
                f'<li><a href="{href}" target="_blank" rel="noopener noreferrer">{label}</a></li>'
            )
        else:
            items.append(f"<li>{label}</li>")
    return f"<h2>{REFERENCES_HEADING}</h2>\n<ul>\n" + "\n".join(items) + "\n</ul>"


def append_references(
    body: str,
    source_titles: Sequence[str],
    chunks: Sequence[CitationChunk],
) -> str:
    """Append a references section to ``body`` when there is anything to cite."""
    sources = resolve_citations(source_titles, chunks)
    if not sources:
        return body
    linked = sum(1 for source in sources if source.url)
    logger.info("Resolved %d/%d source link(s)", linked, len(sources))
    return body.rstrip() + "\n" + build_references_html(sources)

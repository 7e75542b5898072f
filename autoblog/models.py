"""Data models used throughout the blog generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class DateRange(str, Enum):
    """Publication window requested for the news search."""

    ALL = "all"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Template(str, Enum):
    """Writing template that selects the prompt persona."""

    DEFAULT = "default"
    REVIEW = "review"
    INTERVIEW = "interview"
    QA = "qa"
    INVESTMENT = "investment"


class GenerationError(RuntimeError):
    """Raised when an upstream collaborator (model, image search) fails hard."""


@dataclass(frozen=True)
class GenerationRequest:
    """A single user action asking for a new post."""

    keyword: str
    date_range: DateRange = DateRange.ALL
    template: Template = Template.DEFAULT


@dataclass(frozen=True)
class CitationChunk:
    """Grounding source returned by a search-augmented model call."""

    url: str
    label: str


@dataclass(frozen=True)
class RawModelResponse:
    """Unparsed model output plus its grounding metadata."""

    text: str
    citation_chunks: Tuple[CitationChunk, ...] = ()


@dataclass(frozen=True)
class ExtractedSections:
    """Best-effort structured view of a model response.

    ``markers`` holds the names of the marker pairs that were actually found,
    so a missing section can be told apart from one that was present but
    empty.
    """

    title: str = ""
    body: str = ""
    tags: Tuple[str, ...] = ()
    image_keywords: Tuple[str, ...] = ()
    source_titles: Tuple[str, ...] = ()
    markers: FrozenSet[str] = frozenset()

    @property
    def well_formed(self) -> bool:
        return bool(self.markers & {"TITLE", "POST", "TAGS"})

    def has(self, name: str) -> bool:
        return name in self.markers


@dataclass(frozen=True)
class MediaAsset:
    """Image returned by the image search capability, with attribution."""

    image_url: str
    attribution_name: str
    attribution_url: str
    alt_text: str = ""


@dataclass(frozen=True)
class MediaInjection:
    """Outcome of placing media assets into a post body."""

    body: str
    images_found: bool
    inserted: int = 0


@dataclass(frozen=True)
class FinalDocument:
    """Assembled post. ``body_with_media`` stays ``None`` until media is attached."""

    title: str
    body_with_references: str
    tags: Tuple[str, ...] = ()
    image_keywords: Tuple[str, ...] = ()
    body_with_media: Optional[str] = None

    @property
    def body(self) -> str:
        if self.body_with_media is not None:
            return self.body_with_media
        return self.body_with_references

    def with_media(self, body_with_media: Optional[str]) -> "FinalDocument":
        return replace(self, body_with_media=body_with_media)


@dataclass
class ResolvedSource:
    """A reference entry: source title plus the URL it was bound to, if any."""

    title: str
    url: Optional[str] = None
    strategy: Optional[str] = None


@dataclass
class CitationCandidate:
    """Citation chunk tracked during a single resolution pass."""

    chunk: CitationChunk
    used: bool = False


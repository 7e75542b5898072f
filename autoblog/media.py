"""Deterministic placement of image figures between post paragraphs."""

from __future__ import annotations

import html
import logging
import math
from typing import List, Sequence, Set

from .models import MediaAsset, MediaInjection

logger = logging.getLogger("autoblog")

PARAGRAPH_DELIMITER = "</p>"
INSERTION_FRACTIONS = (0.2, 0.5, 0.8)
PLATFORM_NAME = "Pexels"
PLATFORM_URL = "https://www.pexels.com"

_FIGURE_STYLE = "margin: 2.5em 0; text-align: center; clear: both; page-break-inside: avoid;"
_IMG_STYLE = (
    "max-width: 100%; height: auto; border-radius: 8px; "
    "box-shadow: 0 4px 6px rgba(0,0,0,0.1);"
)
_CAPTION_STYLE = "font-size: 0.85em; color: #888; margin-top: 0.7em;"


def render_figure(asset: MediaAsset, keyword: str) -> str:
    """Build the ``<figure>`` markup for one asset, with photographer credit."""
    src = html.escape(asset.image_url, quote=True)
    alt = html.escape(asset.alt_text.strip() or keyword, quote=True)
    name = html.escape(asset.attribution_name or "Unknown")
    credit_url = html.escape(asset.attribution_url or PLATFORM_URL, quote=True)
    return (
        f'\n<figure style="{_FIGURE_STYLE}">\n'
        f'  <img src="{src}" alt="{alt}" style="{_IMG_STYLE}" />\n'
        f'  <figcaption style="{_CAPTION_STYLE}">\n'
        f'    Photo by <a href="{credit_url}" target="_blank" rel="noopener noreferrer">{name}</a>'
        f' on <a href="{PLATFORM_URL}" target="_blank" rel="noopener noreferrer">{PLATFORM_NAME}</a>\n'
        "  </figcaption>\n"
        "</figure>\n"
    )


def insertion_points(paragraph_count: int) -> Set[int]:
    """Paragraph counts (1-based) after which a figure may be placed."""
    return {math.floor(paragraph_count * fraction) for fraction in INSERTION_FRACTIONS}


def inject_media(body: str, assets: Sequence[MediaAsset], keyword: str) -> MediaInjection:
    """Interleave figures for ``assets`` into ``body``.

    Paragraphs are the segments terminated by ``</p>``; text after the last
    delimiter is carried over untouched. Long bodies get up to three figures
    at 20/50/80 percent of the paragraphs, short bodies a single figure after
    the first paragraph.
    """
    if not assets:
        return MediaInjection(body=body, images_found=False)

    fragments = body.split(PARAGRAPH_DELIMITER)
    paragraphs, tail = fragments[:-1], fragments[-1]
    count = len(paragraphs)

    if count == 0:
        logger.debug("Body has no paragraphs; appending a single figure")
        return MediaInjection(
            body=body + render_figure(assets[0], keyword),
            images_found=True,
            inserted=1,
        )

    if count <= 3:
        targets = {1}
        limit = 1
    else:
        targets = insertion_points(count)
        limit = len(assets)

    parts: List[str] = []
    cursor = 0
    for emitted, fragment in enumerate(paragraphs, start=1):
        parts.append(fragment + PARAGRAPH_DELIMITER)
        if emitted in targets and cursor < min(limit, len(assets)):
            parts.append(render_figure(assets[cursor], keyword))
            cursor += 1
    parts.append(tail)

    logger.info("Inserted %d figure(s) into %d paragraph(s)", cursor, count)
    return MediaInjection(body="".join(parts), images_found=cursor > 0, inserted=cursor)

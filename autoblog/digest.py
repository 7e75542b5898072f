"""Daily digest of trending headlines that link back to the generator."""

from __future__ import annotations

import html
import logging
from typing import List, Sequence
from urllib.parse import quote

from .generator import GeminiGenerator

logger = logging.getLogger("autoblog")


def generator_link(base_url: str, title: str) -> str:
    return f"{base_url.rstrip('/')}/?keyword={quote(title, safe='')}&auto=true"


def build_digest_html(topic: str, titles: Sequence[str], base_url: str) -> str:
    """Render the digest body; one numbered link per headline."""
    topic_text = html.escape(topic)
    items: List[str] = []
    for index, title in enumerate(titles, start=1):
        href = html.escape(generator_link(base_url, title), quote=True)
        items.append(
            '    <li style="margin-bottom: 10px;">'
            f'<a href="{href}" style="font-size: 16px; color: #0070f3; text-decoration: none;">'
            f"{index}. {html.escape(title)}</a></li>"
        )
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">\n'
        f'  <h1 style="color: #333;">Daily Blog Ideas: {topic_text}</h1>\n'
        f"  <p>Here are {len(titles)} trending topics for today. "
        "Click one to generate a blog post:</p>\n"
        '  <ul style="list-style-type: none; padding: 0;">\n'
        + "\n".join(items)
        + "\n  </ul>\n"
        "</div>\n"
    )


async def build_digest(generator: GeminiGenerator, topic: str, base_url: str) -> str:
    """Fetch trending titles for ``topic`` and render the digest, or ``""`` when none."""
    titles = await generator.trending_titles(topic)
    if not titles:
        logger.info("No trending titles found for %r", topic)
        return ""
    return build_digest_html(topic, titles, base_url)

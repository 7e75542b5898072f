"""MCP server exposing the blog generator as a tool."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import load_config
from .generator import GeminiGenerator
from .images import PexelsImageSearch
from .models import DateRange, GenerationRequest, Template
from .pipeline import attach_media, generate_post
from .render import compose_html

logger = logging.getLogger("autoblog.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="autoblog")


@mcp.tool()
async def generate_blog_post(
    keyword: str,
    date_range: str = DateRange.ALL.value,
    template: str = Template.DEFAULT.value,
    with_images: bool = True,
) -> str:
    """Write a news-grounded blog post for a keyword and return it as HTML."""
    config = load_config()
    generator = GeminiGenerator(config.model_id, config.require_api_key())
    request = GenerationRequest(
        keyword=keyword.strip(),
        date_range=DateRange(date_range),
        template=Template(template),
    )
    document = await generate_post(request, generator)
    if with_images and config.pexels_api_key:
        searcher = PexelsImageSearch(config.pexels_api_key, timeout=config.search_timeout)
        document, _ = attach_media(document, searcher, request.keyword, count=config.image_count)
    return compose_html(document)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()

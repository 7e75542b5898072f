"""Command-line entry point for the blog generator."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Sequence

from .config import BlogConfig, ConfigError, load_config
from .digest import build_digest
from .generator import GeminiGenerator
from .images import PexelsImageSearch
from .models import DateRange, GenerationError, GenerationRequest, Template
from .pipeline import attach_media, generate_post
from .render import compose_html
from .utils import slugify

logger = logging.getLogger("autoblog.cli")


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return argv
    first = argv[0]
    if first in commands or first.startswith("-"):
        return argv
    return ("generate", *argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _add_generate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("keyword", help="Topic keyword the post should cover")
    parser.add_argument(
        "--date-range",
        choices=[item.value for item in DateRange],
        default=DateRange.ALL.value,
        help="Publication window for the news search",
    )
    parser.add_argument(
        "--template",
        choices=[item.value for item in Template],
        default=Template.DEFAULT.value,
        help="Writing template for the post",
    )
    parser.add_argument(
        "--image-keywords",
        nargs="*",
        default=None,
        help="English image search keywords (defaults to the ones the model suggests)",
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Skip the image search and write the post without figures",
    )
    parser.add_argument(
        "--output",
        default="output",
        type=Path,
        help="Directory where the generated HTML should be written",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Gemini model identifier to use",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _add_digest_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--topic",
        default=None,
        help="Topic for the trending headlines (defaults to DAILY_TOPIC)",
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:3000",
        help="Base URL of the generator that digest links should open",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Gemini model identifier to use",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate news-grounded blog posts with Gemini and Pexels images.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Write a blog post for a keyword"
    )
    _add_generate_arguments(generate_parser)

    digest_parser = subparsers.add_parser(
        "digest", help="Print an HTML digest of trending headlines"
    )
    _add_digest_arguments(digest_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def _run_generate(args: argparse.Namespace, config: BlogConfig) -> Path:
    generator = GeminiGenerator(config.model_id, config.require_api_key())
    request = GenerationRequest(
        keyword=args.keyword.strip(),
        date_range=DateRange(args.date_range),
        template=Template(args.template),
    )

    start = time.perf_counter()
    document = asyncio.run(generate_post(request, generator))
    logger.info("Generated %r in %.2fs", document.title, time.perf_counter() - start)

    if not args.no_images:
        searcher = PexelsImageSearch(
            config.require_pexels_key(), timeout=config.search_timeout
        )
        document, images_found = attach_media(
            document,
            searcher,
            request.keyword,
            keywords=args.image_keywords,
            count=config.image_count,
        )
        if not images_found:
            logger.warning("No images found; writing the post without figures")

    output_dir = config.output_root / slugify(request.keyword)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "index.html"
    output_path.write_text(compose_html(document), encoding="utf-8")
    logger.info("Saved post to %s", output_path)
    if document.tags:
        logger.info("Tags: %s", ", ".join(document.tags))
    return output_path


def _run_digest(args: argparse.Namespace, config: BlogConfig) -> None:
    generator = GeminiGenerator(config.model_id, config.require_api_key())
    topic = args.topic or config.daily_topic
    digest = asyncio.run(build_digest(generator, topic, args.base_url))
    if not digest:
        logger.info("No titles found.")
        return
    sys.stdout.write(digest)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    overrides = {"model_id": args.model}
    if args.command == "generate":
        overrides["output_root"] = Path(args.output).resolve()
    config = load_config(**overrides)

    try:
        if args.command == "generate":
            _run_generate(args, config)
        else:
            _run_digest(args, config)
    except (ConfigError, GenerationError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()

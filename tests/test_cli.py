"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from autoblog import cli
from autoblog.config import BlogConfig
from autoblog.models import FinalDocument, GenerationError


def _config_factory(**values):
    def factory(**overrides):
        merged = {key: value for key, value in overrides.items() if value is not None}
        merged.update(values)
        return BlogConfig(**merged)

    return factory


class TestParseArgs:
    def test_bare_keyword_defaults_to_generate(self) -> None:
        args = cli.parse_args(["AI 반도체", "--template", "review"])

        assert args.command == "generate"
        assert args.keyword == "AI 반도체"
        assert args.template == "review"
        assert args.date_range == "all"

    def test_digest_command(self) -> None:
        args = cli.parse_args(["digest", "--topic", "Robotics"])

        assert args.command == "digest"
        assert args.topic == "Robotics"

    def test_rejects_unknown_template(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_args(["generate", "kw", "--template", "poem"])


class TestMain:
    def test_missing_api_key_exits(self) -> None:
        with patch("autoblog.cli.load_config", side_effect=_config_factory()):
            with pytest.raises(SystemExit) as excinfo:
                cli.main(["generate", "kw", "--no-images"])

        assert excinfo.value.code == 1

    def test_generation_error_exits(self, tmp_path: Path) -> None:
        with patch(
            "autoblog.cli.load_config", side_effect=_config_factory(gemini_api_key="k")
        ), patch(
            "autoblog.cli.generate_post",
            new=AsyncMock(side_effect=GenerationError("블로그 글 생성 중 오류 발생: boom")),
        ):
            with pytest.raises(SystemExit) as excinfo:
                cli.main(["generate", "kw", "--no-images", "--output", str(tmp_path)])

        assert excinfo.value.code == 1

    def test_writes_html(self, tmp_path: Path) -> None:
        document = FinalDocument(title="Electric cars", body_with_references="<p>body</p>")
        with patch(
            "autoblog.cli.load_config", side_effect=_config_factory(gemini_api_key="k")
        ), patch("autoblog.cli.generate_post", new=AsyncMock(return_value=document)):
            cli.main(["generate", "electric cars", "--no-images", "--output", str(tmp_path)])

        output = tmp_path / "electric-cars" / "index.html"
        assert output.exists()
        assert "<h1>Electric cars</h1>" in output.read_text(encoding="utf-8")

"""Configuration objects and constants for the blog generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL_ID = "gemini-2.5-flash"
DEFAULT_DAILY_TOPIC = "AI Trends"


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


@dataclass
class BlogConfig:
    """Top-level settings that control generation and media lookup."""

    output_root: Path = Path("output")
    model_id: str = DEFAULT_MODEL_ID
    gemini_api_key: Optional[str] = None
    pexels_api_key: Optional[str] = None
    image_count: int = 3
    search_timeout: float = 15.0
    daily_topic: str = DEFAULT_DAILY_TOPIC

    def require_api_key(self) -> str:
        if not self.gemini_api_key:
            raise ConfigError("GEMINI_API_KEY (or API_KEY) environment variable not set")
        return self.gemini_api_key

    def require_pexels_key(self) -> str:
        if not self.pexels_api_key:
            raise ConfigError("PEXELS_API_KEY environment variable not set")
        return self.pexels_api_key


def load_config(env_file: Optional[Path] = None, **overrides) -> BlogConfig:
    """Build a :class:`BlogConfig` from ``.env`` and the process environment."""
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    values = {
        "model_id": os.environ.get("AUTOBLOG_MODEL") or DEFAULT_MODEL_ID,
        "gemini_api_key": os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY"),
        "pexels_api_key": os.environ.get("PEXELS_API_KEY"),
        "daily_topic": os.environ.get("DAILY_TOPIC") or DEFAULT_DAILY_TOPIC,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return BlogConfig(**values)

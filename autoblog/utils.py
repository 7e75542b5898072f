"""Utility helpers for string normalization and light HTML handling."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(value: str, fallback: str = "post") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only."""
    normalized = value.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def strip_tags(fragment: str) -> str:
    """Return the text content of an HTML fragment, trimmed."""
    if not fragment:
        return ""
    if "<" not in fragment and "&" not in fragment:
        return fragment.strip()
    soup = BeautifulSoup(fragment, "html.parser")
    return soup.get_text().strip()


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence if the model adds one."""
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped

    lines = stripped.splitlines()
    closing_index = None
    for idx in range(len(lines) - 1, 0, -1):
        if lines[idx].strip().startswith("```"):
            closing_index = idx
            break

    if closing_index is None:
        return stripped

    return "\n".join(lines[1:closing_index]).strip()

"""Image lookup against the Pexels search API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

import requests

from .models import MediaAsset

logger = logging.getLogger("autoblog")

PEXELS_SEARCH_URL = "https://api.pexels.com/v1/search"
MAX_PER_PAGE = 80


class ImageSearcher(Protocol):
    def search(self, query: str, count: int) -> List[MediaAsset]:
        ...


def photo_to_asset(photo: Dict[str, Any]) -> Optional[MediaAsset]:
    """Convert one Pexels ``photo`` object to a :class:`MediaAsset`."""
    src = photo.get("src")
    if not isinstance(src, dict):
        return None
    image_url = src.get("large") or src.get("large2x") or src.get("original")
    if not image_url:
        return None
    return MediaAsset(
        image_url=image_url,
        attribution_name=photo.get("photographer") or "",
        attribution_url=photo.get("photographer_url") or photo.get("url") or "",
        alt_text=(photo.get("alt") or "").strip(),
    )


class PexelsImageSearch:
    """Search Pexels for landscape photos. Failures degrade to an empty list."""

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15.0,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    def search(self, query: str, count: int) -> List[MediaAsset]:
        query = query.strip()
        if not query or count <= 0:
            return []
        params = {
            "query": query,
            "per_page": min(count, MAX_PER_PAGE),
            "orientation": "landscape",
        }
        try:
            resp = self._session.get(
                PEXELS_SEARCH_URL,
                params=params,
                headers={"Authorization": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            logger.warning("Pexels search failed for %r: %s", query, exc)
            return []
        except ValueError as exc:
            logger.warning("Pexels returned invalid JSON for %r: %s", query, exc)
            return []

        if not isinstance(payload, dict):
            logger.warning("Unexpected Pexels payload for %r", query)
            return []

        photos = payload.get("photos") or []
        if not isinstance(photos, list):
            logger.warning("Unexpected Pexels photo list for %r", query)
            return []

        assets: List[MediaAsset] = []
        for photo in photos:
            if not isinstance(photo, dict):
                logger.warning("Skipping malformed Pexels photo for %r", query)
                continue
            asset = photo_to_asset(photo)
            if asset is None:
                logger.warning("Skipping Pexels photo without an image URL for %r", query)
                continue
            assets.append(asset)
        logger.debug("Pexels returned %d photo(s) for %r", len(assets), query)
        return assets[:count]


def dedupe_assets(assets: Iterable[MediaAsset]) -> List[MediaAsset]:
    """Drop repeated image URLs while keeping first-seen order."""
    seen: Dict[str, MediaAsset] = {}
    for asset in assets:
        if asset.image_url not in seen:
            seen[asset.image_url] = asset
    return list(seen.values())


def find_media(
    searcher: ImageSearcher,
    keywords: Iterable[str],
    fallback_keyword: str,
    count: int = 3,
) -> List[MediaAsset]:
    """Try each keyword in turn, then the fallback; stop at the first hit."""
    queries = [kw.strip() for kw in keywords if kw and kw.strip()]
    if fallback_keyword.strip() and fallback_keyword.strip() not in queries:
        queries.append(fallback_keyword.strip())

    for query in queries:
        logger.info("Searching images for %r", query)
        assets = dedupe_assets(searcher.search(query, count))
        if assets:
            return assets[:count]
    logger.info("No images found for any of %d keyword(s)", len(queries))
    return []

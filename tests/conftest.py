"""Shared fixtures for autoblog tests."""

from __future__ import annotations

import pytest

from autoblog.models import CitationChunk, MediaAsset, RawModelResponse

WELL_FORMED_TEXT = """\
[TITLE]
 AI 반도체 시장, 2025년 판도가 바뀐다 
[/TITLE]
[POST]
<h2>시장 개요</h2>
<p>첫 번째 문단입니다.</p>
<p>두 번째 문단입니다.</p>
[/POST]
[TAGS]
AI, 반도체 , ,시장동향,NVIDIA
[/TAGS]
[IMAGE_KEYWORDS]
semiconductor factory, stock market chart
[/IMAGE_KEYWORDS]
[SOURCES]
1. 엔비디아 실적 발표 - 연합뉴스
- 삼성전자 HBM 공급 확대 - 한국경제

• TSMC 증설 계획
* 반도체 수출 회복세 - Unknown Daily
[/SOURCES]
"""


@pytest.fixture
def well_formed_text() -> str:
    return WELL_FORMED_TEXT


@pytest.fixture
def citation_chunks() -> tuple:
    return (
        CitationChunk(url="https://grounding.example/hk", label="hankyung.com"),
        CitationChunk(url="https://grounding.example/yna", label="yna.co.kr"),
        CitationChunk(url="https://grounding.example/other", label="example.org"),
    )


@pytest.fixture
def well_formed_response(well_formed_text: str, citation_chunks: tuple) -> RawModelResponse:
    return RawModelResponse(text=well_formed_text, citation_chunks=citation_chunks)


@pytest.fixture
def assets() -> list:
    return [
        MediaAsset(
            image_url=f"https://images.pexels.com/photos/{idx}/photo.jpeg",
            attribution_name=f"Photographer {idx}",
            attribution_url=f"https://www.pexels.com/@p{idx}",
            alt_text=f"photo {idx}",
        )
        for idx in range(1, 4)
    ]

"""Prompt text for post generation and trending-topic lookups."""

from __future__ import annotations

from typing import Dict

from .models import DateRange, GenerationRequest, Template

DATE_RANGE_PHRASES: Dict[DateRange, str] = {
    DateRange.ALL: "최신",
    DateRange.DAY: "지난 24시간 이내에 발행된",
    DateRange.WEEK: "지난 1주일 이내에 발행된",
    DateRange.MONTH: "지난 1개월 이내에 발행된",
    DateRange.YEAR: "지난 1년 이내에 발행된",
}

_COMMON_INSTRUCTIONS = """
작업 지시사항 (아래 순서를 반드시 지켜주세요):
1. **뉴스 검색**: Google 검색 도구를 사용하여 위 키워드에 대한 {date_phrase} 뉴스 기사 5개를 찾으세요.
2. **본문 작성**: 찾은 5개의 뉴스 기사 내용을 종합하고 분석하여 하나의 완성된 블로그 글 본문을 작성하세요. 이미지는 삽입하지 마세요.
3. **태그 생성**: 본문과 가장 관련성이 높은 키워드 태그 10개를 쉼표(,)로 구분하여 생성하세요. 예시: AI,반도체,기술,시장동향,NVIDIA,삼성전자,TSMC,미래기술,투자,혁신
4. **이미지 키워드**: 본문 분위기에 어울리는 사진을 찾기 위한 영어 검색어 3개를 쉼표로 구분하여 제시하세요. 예시: semiconductor factory, stock market chart, artificial intelligence
5. **제목 생성**: 클릭을 유도하면서 검색 엔진 최적화(SEO)에 유리한 제목을 만드세요. 제목에는 반드시 핵심 키워드가 포함되어야 합니다.
6. **출처 목록**: 참고한 뉴스 기사 5개를 한 줄에 하나씩 "기사 제목 - 언론사명" 형식으로 나열하세요. 본문 안에는 참고 자료 섹션이나 링크 목록을 넣지 마세요.
7. **공통 규칙**:
   - 글은 반드시 한국어로 작성합니다.
   - 본문 길이는 3,000자에서 4,000자 사이입니다.
   - 본문은 HTML 형식이며 <html>, <head>, <body> 태그 없이 <h2>, <h3>, <p>, <ul>, <ol>, <li>, <strong>, <blockquote> 등만 사용합니다.
8. **최종 결과물 형식**: 다른 설명 없이 아래 형식만 정확하게 반환하세요.
[TITLE]
5번 단계의 제목
[/TITLE]
[POST]
2번 단계의 HTML 본문
[/POST]
[TAGS]
3번 단계의 태그 목록
[/TAGS]
[IMAGE_KEYWORDS]
4번 단계의 영어 검색어
[/IMAGE_KEYWORDS]
[SOURCES]
6번 단계의 출처 목록
[/SOURCES]
"""

_PERSONAS: Dict[Template, str] = {
    Template.DEFAULT: """
당신은 전문 블로그 작가입니다. 사용자가 제공한 키워드와 관련된 블로그 글을 작성해야 합니다.

키워드: "{keyword}"
""",
    Template.REVIEW: """
당신은 전문 테크/제품 리뷰어입니다. 키워드와 관련된 제품 또는 서비스에 대한 심층 리뷰 블로그 글을 작성해야 합니다.

키워드: "{keyword}"

리뷰 글의 구조:
- <h2>[제품/서비스 이름] 소개</h2>: 어떤 제품/서비스인지, 왜 주목받고 있는지 소개합니다.
- <h2>주요 특징 및 기능</h2>: 핵심적인 특징과 기능을 상세히 설명합니다.
- <h2>장점</h2>: 강점을 분석하여 목록으로 제시합니다.
- <h2>단점</h2>: 예상되는 문제점과 한계를 목록으로 제시합니다.
- <h2>추천 대상</h2>: 어떤 사용자에게 유용할지 구체적으로 추천합니다.
- <h2>결론 및 총평</h2>: 최종 평가로 글을 마무리합니다.
""",
    Template.INTERVIEW: """
당신은 전문 IT 저널리스트입니다. 키워드 분야의 가상 전문가와 진행하는 인터뷰 형식의 블로그 글을 작성해야 합니다.

키워드: "{keyword}"

인터뷰 글의 구조:
- <h2>[키워드] 분야 전문가와의 대담</h2>: 인터뷰의 배경과 가상의 전문가를 소개합니다.
- <h3>[질문]</h3> 다음에 <p>[전문가의 답변]</p>을 5~7회 반복합니다.
- <h2>인터뷰를 마치며</h2>: 내용을 요약하고 전망을 제시합니다.

전문가의 답변은 반드시 찾은 뉴스 기사 내용을 근거로 작성합니다.
""",
    Template.QA: """
당신은 독자의 궁금증을 풀어주는 전문 지식 블로거입니다. 키워드에 대해 독자들이 가장 궁금해할 질문과 답변(Q&A) 형식의 글을 작성해야 합니다.

키워드: "{keyword}"

Q&A 글의 구조:
- <h2>[키워드]에 대해 무엇이든 물어보세요</h2>: 취지를 설명하는 서론을 작성합니다.
- <h3>Q. [예상 질문]</h3> 다음에 <p>[답변]</p>을 5~7회 반복합니다.
- <h2>마무리하며</h2>: 요약과 추가 조언으로 마무리합니다.
""",
    Template.INVESTMENT: """
당신은 전문 금융 애널리스트입니다. 키워드와 관련된 최신 뉴스를 분석하여 투자 전략 보고서를 작성해야 합니다.

키워드: "{keyword}"

투자 보고서의 구조:
- <h2>시장 개요 및 최신 동향</h2>
- <h2>핵심 투자 포인트</h2>
- <h2>기회 요인</h2>
- <h2>리스크 요인</h2>
- <h2>투자 전략 및 결론</h2>

모든 분석은 찾은 뉴스 기사를 근거로 객관적으로 작성하고 추측성 발언은 피합니다.
""",
}

_TRENDING_PROMPT = """
Find 5 trending news titles related to "{topic}" from the last 24 hours.
Return ONLY the titles as a JSON array of strings.
Example: ["Title 1", "Title 2", ...]
"""


def date_range_phrase(date_range: DateRange) -> str:
    return DATE_RANGE_PHRASES.get(DateRange(date_range), DATE_RANGE_PHRASES[DateRange.ALL])


def build_prompt(request: GenerationRequest) -> str:
    """Render the full generation prompt for a request."""
    persona = _PERSONAS.get(Template(request.template), _PERSONAS[Template.DEFAULT])
    instructions = _COMMON_INSTRUCTIONS.format(date_phrase=date_range_phrase(request.date_range))
    return persona.format(keyword=request.keyword).strip() + "\n" + instructions


def build_trending_prompt(topic: str) -> str:
    return _TRENDING_PROMPT.format(topic=topic).strip()

"""Tests for the title resolution cascade."""

from __future__ import annotations

from autoblog.titles import (
    classify_topic,
    resolve_title,
    synthesize_title,
    title_from_headings,
    title_from_lines,
)


class TestHeadingStrategy:
    def test_uses_h1_text(self) -> None:
        body = "<h1>Foo</h1><p>본문</p>"

        assert resolve_title(body, body, "kw") == "Foo"

    def test_strips_inner_tags(self) -> None:
        body = '<h1 class="t"><strong>Foo</strong> Bar</h1>'

        assert title_from_headings(body, "", "kw") == "Foo Bar"

    def test_falls_back_to_h2_when_h1_empty(self) -> None:
        body = "<h1> <br/> </h1><h2>Second level</h2>"

        assert title_from_headings(body, "", "kw") == "Second level"

    def test_no_headings(self) -> None:
        assert title_from_headings("<p>text</p>", "", "kw") is None


class TestLineStrategy:
    def test_picks_first_plausible_line(self) -> None:
        raw = "[POST]\n<p>short</p>\nA reasonably long candidate title line\n[/POST]"

        assert resolve_title("<p>short</p>", raw, "kw") == "A reasonably long candidate title line"

    def test_strips_inline_tags(self) -> None:
        raw = "Intro with <strong>bold</strong> words here"

        assert title_from_lines("", raw, "kw") == "Intro with bold words here"

    def test_skips_short_and_long_lines(self) -> None:
        raw = "too short\n" + ("x" * 151) + "\n[TAGS]\nexactly ten"

        assert title_from_lines("", raw, "kw") == "exactly ten"

    def test_skips_markup_lines(self) -> None:
        raw = "<div>\n<p>A paragraph line that is long enough</p>\n[/TITLE]"

        assert title_from_lines("", raw, "kw") is None

    def test_ignores_metadata_blocks(self) -> None:
        raw = (
            "[POST]\n<p>짧은 본문</p>\n[/POST]\n"
            "[TAGS]\nAI, 반도체, 시장동향\n[/TAGS]\n"
            "[IMAGE_KEYWORDS]\nsemiconductor factory\n[/IMAGE_KEYWORDS]\n"
            "[SOURCES]\n- 반도체 수출 급증 - 연합뉴스\n[/SOURCES]"
        )

        assert title_from_lines("<p>짧은 본문</p>", raw, "반도체") is None
        title = resolve_title("<p>짧은 본문</p>", raw, "반도체")
        assert title != "AI, 반도체, 시장동향"
        assert "반도체" in title


class TestTemplateStrategy:
    def test_default_template_contains_keyword(self) -> None:
        title = resolve_title("<p>짧음</p>", "[POST]\n<p>짧음</p>\n[/POST]", "전기차")

        assert title
        assert "전기차" in title

    def test_never_empty_even_without_keyword(self) -> None:
        assert synthesize_title("", "", "")

    def test_topic_classification(self) -> None:
        assert classify_topic("주식 시장이 크게 움직였다") == "investment"
        assert classify_topic("인공지능 기술의 발전") == "technology"
        assert classify_topic("이 제품의 장점과 단점") == "review"
        assert classify_topic("평범한 이야기") == "default"

    def test_latin_indicators_match_whole_words(self) -> None:
        assert classify_topic("MAIN street PAINTING") == "default"
        assert classify_topic("Supermarkets open late") == "default"
        assert classify_topic("AI가 바꾸는 세상") == "technology"
        assert classify_topic("The Stock rallied") == "investment"

    def test_investment_template_is_selected(self) -> None:
        title = synthesize_title("<p>증시 전망</p>", "", "반도체")

        assert title.startswith("반도체 투자 전략")


class TestCustomStrategies:
    def test_strategies_run_in_order(self) -> None:
        calls = []

        def first(body: str, raw: str, keyword: str):
            calls.append("first")
            return None

        def second(body: str, raw: str, keyword: str):
            calls.append("second")
            return "from second"

        def third(body: str, raw: str, keyword: str):
            calls.append("third")
            return "from third"

        strategies = (("a", first), ("b", second), ("c", third))

        assert resolve_title("", "", "kw", strategies=strategies) == "from second"
        assert calls == ["first", "second"]

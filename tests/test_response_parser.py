"""Tests for the model response recovery parser."""

import json

import pytest

from schemas.news_analysis import MediaBias, SearchResult
from services.article_normalizer import (
    COMMON_KEYWORDS_PLACEHOLDER,
    EVIDENCE_PLACEHOLDER,
    KEYWORDS_PLACEHOLDER,
    MAIN_CLAIM_PLACEHOLDER,
    fallback_trend,
)
from services.response_parser import (
    MAX_SALVAGED_ARTICLES,
    failed_search_result,
    load_json_object,
    parse_search_response,
    salvage_articles,
    slice_json_object,
    strip_code_fence,
)

# -- Fixtures --


@pytest.fixture
def full_payload() -> dict:
    return {
        "articles": [
            {
                "title": "금리 동결 결정",
                "source": "한겨레",
                "url": "https://hani.co.kr/1",
                "publishedDate": "2026-10-01",
                "keywords": ["금리", "한국은행"],
                "mainClaim": "동결은 서민 부담을 키운다",
                "evidence": ["가계부채 증가"],
                "summary": "한국은행이 금리를 동결했다.",
            },
            {
                "title": "물가 전망",
                "source": "경향신문",
                "url": "https://khan.co.kr/2",
            },
        ],
        "commonKeywords": ["금리", "물가"],
        "overallTrend": "서민 경제에 대한 우려가 크다.",
    }


def _minimal_article(i: int) -> str:
    return f'{{"title": "T{i}", "source": "S{i}", "url": "http://x/{i}"}}'


# -- Ladder helpers --


def test_strip_code_fence_with_json_tag() -> None:
    assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_strip_code_fence_without_tag() -> None:
    assert strip_code_fence('before ```\n{"a": 1}\n``` after') == '{"a": 1}'


def test_strip_code_fence_without_fence_returns_text() -> None:
    assert strip_code_fence('{"a": 1}') == '{"a": 1}'


def test_slice_json_object() -> None:
    assert slice_json_object('Here you go: {"a": {"b": 1}} hope it helps') == '{"a": {"b": 1}}'
    assert slice_json_object("no braces") == "no braces"
    assert slice_json_object("} backwards {") == "} backwards {"


def test_load_json_object_rejects_arrays() -> None:
    assert load_json_object("[1, 2, 3]") is None
    assert load_json_object('{"a": 1}') == {"a": 1}


# -- Strict parse path --


def test_parse_bare_json(full_payload: dict) -> None:
    result = parse_search_response(json.dumps(full_payload), MediaBias.PROGRESSIVE, "금리")

    assert len(result.articles) == 2
    first = result.articles[0]
    assert first.title == "금리 동결 결정"
    assert first.keywords == ["금리", "한국은행"]
    assert first.evidence == ["가계부채 증가"]
    assert result.commonKeywords == ["금리", "물가"]
    assert result.overallTrend == "서민 경제에 대한 우려가 크다."

    second = result.articles[1]
    assert second.keywords == [KEYWORDS_PLACEHOLDER]
    assert second.summary == "물가 전망"


def test_fenced_json_matches_bare_json(full_payload: dict) -> None:
    bare = json.dumps(full_payload, ensure_ascii=False)
    fenced = f"```json\n{bare}\n```"

    assert parse_search_response(fenced, MediaBias.PROGRESSIVE, "금리") == parse_search_response(
        bare, MediaBias.PROGRESSIVE, "금리"
    )


def test_prose_wrapped_json_example_scenario() -> None:
    text = (
        'Here is the result: {"articles":[{"title":"A","source":"B","url":"http://x"}],'
        '"commonKeywords":[],"overallTrend":""}'
    )
    result = parse_search_response(text, MediaBias.PROGRESSIVE, "test")

    assert len(result.articles) == 1
    article = result.articles[0]
    assert article.title == "A"
    assert article.source == "B"
    assert article.url == "http://x"
    assert article.bias == MediaBias.PROGRESSIVE
    assert article.keywords == [KEYWORDS_PLACEHOLDER]
    assert article.evidence == [EVIDENCE_PLACEHOLDER]
    assert article.mainClaim == MAIN_CLAIM_PLACEHOLDER
    assert result.commonKeywords == [COMMON_KEYWORDS_PLACEHOLDER]
    assert result.overallTrend == fallback_trend(MediaBias.PROGRESSIVE, "test")
    assert "progressive" in result.overallTrend
    assert "test" in result.overallTrend


def test_payload_bias_is_ignored(full_payload: dict) -> None:
    full_payload["articles"][0]["bias"] = "progressive"
    result = parse_search_response(json.dumps(full_payload), MediaBias.CONSERVATIVE, "금리")
    assert all(a.bias == MediaBias.CONSERVATIVE for a in result.articles)


def test_valid_json_without_articles_gets_group_defaults() -> None:
    result = parse_search_response('{"overallTrend": "  "}', MediaBias.CONSERVATIVE, "kw")

    assert result.articles == []
    assert result.commonKeywords == [COMMON_KEYWORDS_PLACEHOLDER]
    assert result.overallTrend == fallback_trend(MediaBias.CONSERVATIVE, "kw")


def test_non_object_article_entries_are_skipped() -> None:
    text = json.dumps({"articles": ["junk", 3, {"title": "ok"}, None]})
    result = parse_search_response(text, MediaBias.PROGRESSIVE, "kw")
    assert [a.title for a in result.articles] == ["ok"]


def test_articles_not_a_list_is_treated_as_empty() -> None:
    result = parse_search_response('{"articles": {"title": "x"}}', MediaBias.PROGRESSIVE, "kw")
    assert result.articles == []


def test_strict_parse_arrays_are_truncated() -> None:
    text = json.dumps(
        {
            "articles": [
                {
                    "title": "t",
                    "keywords": [str(i) for i in range(8)],
                    "evidence": [str(i) for i in range(5)],
                }
            ]
        }
    )
    article = parse_search_response(text, MediaBias.PROGRESSIVE, "kw").articles[0]
    assert len(article.keywords) == 5
    assert len(article.evidence) == 3


# -- Salvage path --


def test_truncated_json_falls_through_to_salvage() -> None:
    text = (
        '{"articles": [{"title": "첫 기사", "source": "조선일보", "url": "https://chosun.com/1", '
        '"publishedDate": "2026-09-30", "keywords": ["a", "b"], "mainClaim": "주장", '
        '"evidence": ["근거"], "summary": "요약"}, '
        '{"title": "잘린 기사", "source": "동아일보", "url": "https://donga.com/2", "keywords": ["x"'
    )
    result = parse_search_response(text, MediaBias.CONSERVATIVE, "kw")

    assert [a.title for a in result.articles] == ["첫 기사", "잘린 기사"]
    first = result.articles[0]
    assert first.publishedDate == "2026-09-30"
    assert first.keywords == ["a", "b"]
    assert first.mainClaim == "주장"
    assert first.evidence == ["근거"]
    assert first.summary == "요약"

    # Unterminated array is not recovered
    assert result.articles[1].keywords == [KEYWORDS_PLACEHOLDER]
    assert result.commonKeywords == [COMMON_KEYWORDS_PLACEHOLDER]
    assert result.overallTrend == fallback_trend(MediaBias.CONSERVATIVE, "kw")


def test_salvage_cap_keeps_first_four_in_order() -> None:
    text = "[" + ", ".join(_minimal_article(i) for i in range(6))  # no closing bracket
    text = "broken " + text + " {"

    result = parse_search_response(text, MediaBias.PROGRESSIVE, "kw")

    assert MAX_SALVAGED_ARTICLES == 4
    assert [a.title for a in result.articles] == ["T0", "T1", "T2", "T3"]


def test_salvage_articles_cap_with_identical_repetitions() -> None:
    text = " ".join(_minimal_article(0) for _ in range(6))
    assert len(salvage_articles(text)) == 4


def test_salvage_does_not_read_fields_from_the_next_object() -> None:
    text = (
        '{"title": "A", "source": "B", "url": "u1"}, '
        '{"title": "C", "source": "D", "url": "u2", "summary": "only C"}'
    )
    candidates = salvage_articles(text)

    assert candidates[0]["summary"] == ""
    assert candidates[1]["summary"] == "only C"


def test_salvage_does_not_borrow_required_fields_from_the_next_object() -> None:
    text = (
        '{"articles": [{"title": "A", "source": "B", "summary": "about A"}, '
        '{"title": "C", "source": "D", "url": "https://d/c", "summary": "about C"}, '
        '{"title": "E'
    )
    candidates = salvage_articles(text)

    assert [(c["title"], c["url"], c["summary"]) for c in candidates] == [
        ("C", "https://d/c", "about C")
    ]


def test_salvage_list_fields_strip_quotes_and_blanks() -> None:
    text = '{"title": "A", "source": "B", "url": "u", "keywords": ["k1", "", " k2 ",], "evidence": []'
    candidate = salvage_articles(text)[0]
    assert candidate["keywords"] == ["k1", "k2"]
    assert candidate["evidence"] == []


def test_salvage_requires_field_order() -> None:
    text = '{"url": "u", "source": "B", "title": "A"'
    assert salvage_articles(text) == []


# -- Total failure --


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "죄송합니다. 해당 기간의 기사를 찾을 수 없습니다.",
        "{not json at all}",
        "[1, 2, 3]",
        "```json\n```",
        "\x00\x01\xff garbage ]]}{{",
        "{" * 5000,
        '{"articles": [' * 3000,
    ],
)
def test_unrecoverable_text_gives_empty_result(text: str) -> None:
    result = parse_search_response(text, MediaBias.PROGRESSIVE, "kw")

    assert isinstance(result, SearchResult)
    assert result.articles == []
    assert result.commonKeywords == []
    assert result.overallTrend == ""


def test_none_input_does_not_raise() -> None:
    result = parse_search_response(None, MediaBias.PROGRESSIVE, "kw")  # type: ignore[arg-type]
    assert result.articles == []


def test_failed_search_result_carries_error_note() -> None:
    result = failed_search_result(MediaBias.PROGRESSIVE, RuntimeError("timeout"))
    assert result.articles == []
    assert result.commonKeywords == []
    assert "진보" in result.overallTrend
    assert "timeout" in result.overallTrend

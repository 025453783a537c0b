# services/response_parser.py
"""
Best-effort recovery of news search results from raw model output.

The model is told to answer with JSON only, but it sometimes wraps the JSON in
a code fence, adds commentary around it, or stops mid-object when it runs out
of tokens. parse_search_response works down a fallback ladder:

1. strip a ``` / ```json fence if there is one
2. slice from the first "{" to the last "}"
3. json.loads the slice
4. if that fails, regex-salvage individual articles from the original text
5. normalize every article and fill group-level defaults
6. if nothing at all was recovered, return an empty result

It never raises on bad input.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

from schemas.news_analysis import MediaBias, SearchResult
from services.article_normalizer import (
    clean_text,
    fallback_trend,
    normalize_article,
    normalize_common_keywords,
)
from services.media_sources import get_bias_label

logger = logging.getLogger(__name__)


MAX_SALVAGED_ARTICLES = 4

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

# title, source and url must appear in this order inside one object;
# the gaps cannot cross a brace, so a match never spans two articles
SALVAGE_ARTICLE_PATTERN = re.compile(
    r'"title"\s*:\s*"([^"]+)"[^{}]*?"source"\s*:\s*"([^"]+)"[^{}]*?"url"\s*:\s*"([^"]+)"'
)

SALVAGE_TEXT_FIELDS = ("publishedDate", "mainClaim", "summary")
SALVAGE_LIST_FIELDS = ("keywords", "evidence")


def empty_search_result() -> SearchResult:
    return SearchResult(articles=[], commonKeywords=[], overallTrend="")


def failed_search_result(bias: MediaBias, error: BaseException) -> SearchResult:
    """Empty result whose trend line tells the user the search itself failed."""
    return SearchResult(
        articles=[],
        commonKeywords=[],
        overallTrend=f"{get_bias_label(bias)} 언론 검색 중 오류가 발생했습니다: {error}",
    )


def strip_code_fence(text: str) -> str:
    match = CODE_FENCE_PATTERN.search(text)
    if match:
        return match.group(1)
    return text


def slice_json_object(text: str) -> str:
    first_brace = text.find("{")
    last_brace = text.rfind("}")
    if first_brace != -1 and last_brace > first_brace:
        return text[first_brace:last_brace + 1]
    return text


def load_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Fence strip, brace slice and json.loads. None unless the result is a JSON object."""
    json_str = slice_json_object(strip_code_fence(text.strip()))
    try:
        data = json.loads(json_str)
    except (ValueError, RecursionError) as e:
        logger.info(f"Strict JSON parse failed: {e}")
        return None

    if not isinstance(data, dict):
        logger.info(f"Parsed JSON is a {type(data).__name__}, not an object")
        return None
    return data


def _extract_text_field(article_text: str, field_name: str) -> str:
    match = re.search(rf'"{field_name}"\s*:\s*"([^"]*)"', article_text)
    return match.group(1).strip() if match else ""


def _extract_list_field(article_text: str, field_name: str) -> List[str]:
    match = re.search(rf'"{field_name}"\s*:\s*\[([^\]]*)\]', article_text)
    if not match:
        return []
    items = [item.replace('"', "").strip() for item in match.group(1).split(",")]
    return [item for item in items if item]


def salvage_articles(text: str, limit: int = MAX_SALVAGED_ARTICLES) -> List[Dict[str, Any]]:
    """
    Scrape article candidates out of text that is not valid JSON.

    Each match of title/source/url starts a candidate; the candidate's object
    is taken to end at the next "}" (or at the end of the text if it was cut
    off). Optional fields are looked up inside that span only. Values are not
    normalized here.
    """
    candidates: List[Dict[str, Any]] = []

    for match in SALVAGE_ARTICLE_PATTERN.finditer(text):
        if len(candidates) >= limit:
            break

        title, source, url = match.groups()
        article_end = text.find("}", match.end())
        if article_end == -1:
            article_end = len(text)
        article_text = text[match.start():article_end]

        candidate: Dict[str, Any] = {"title": title, "source": source, "url": url}
        for field_name in SALVAGE_TEXT_FIELDS:
            candidate[field_name] = _extract_text_field(article_text, field_name)
        for field_name in SALVAGE_LIST_FIELDS:
            candidate[field_name] = _extract_list_field(article_text, field_name)
        candidates.append(candidate)

    return candidates


def parse_search_response(raw_text: str, bias: MediaBias, keyword: str) -> SearchResult:
    """
    Turn raw model output into a normalized SearchResult for one bias group.

    The bias always comes from the caller; a "bias" key in the payload is
    ignored.
    """
    label = get_bias_label(bias)
    content = raw_text.strip() if isinstance(raw_text, str) else ""

    logger.info(f"[{label}] response length: {len(content)} chars")
    logger.debug(f"[{label}] response preview: {content[:500]}")

    payload = load_json_object(content)

    if payload is not None:
        raw_articles = payload.get("articles")
        if not isinstance(raw_articles, list):
            raw_articles = []
        candidates = [article for article in raw_articles if isinstance(article, dict)]
        common_keywords = payload.get("commonKeywords")
        overall_trend = clean_text(payload.get("overallTrend"))
        logger.info(f"[{label}] JSON parse succeeded: {len(candidates)} articles")
    else:
        candidates = salvage_articles(content)
        if not candidates:
            logger.warning(f"[{label}] could not recover any article from the response")
            return empty_search_result()
        common_keywords = None
        overall_trend = ""
        logger.info(f"[{label}] salvaged {len(candidates)} articles from malformed JSON")

    return SearchResult(
        articles=[normalize_article(candidate, bias) for candidate in candidates],
        commonKeywords=normalize_common_keywords(common_keywords),
        overallTrend=overall_trend or fallback_trend(bias, keyword),
    )

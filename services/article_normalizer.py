# services/article_normalizer.py
"""
Field normalization for articles recovered from model output.

normalize_article is the only place in the service layer that builds an
AnalyzedArticle. It never fails: every field has a fallback chain, so any
mapping (including an empty one) yields a complete article.
"""
from typing import Any, List, Mapping

from schemas.news_analysis import AnalyzedArticle, MediaBias
from services.media_sources import get_bias_label
from services.prompt_builder import MAX_ARTICLE_EVIDENCE, MAX_ARTICLE_KEYWORDS


TITLE_PLACEHOLDER = "제목 미상"
SOURCE_PLACEHOLDER = "출처 미상"
KEYWORDS_PLACEHOLDER = "키워드 없음"
MAIN_CLAIM_PLACEHOLDER = "내용 확인 필요"
EVIDENCE_PLACEHOLDER = "근거 확인 필요"
SUMMARY_PLACEHOLDER = "요약 없음"
COMMON_KEYWORDS_PLACEHOLDER = "키워드 확인 필요"


def clean_text(value: Any) -> str:
    """Trimmed string for a raw JSON value; None, lists and dicts become ''."""
    if value is None or isinstance(value, (list, dict)):
        return ""
    return str(value).strip()


def clean_list(value: Any) -> List[str]:
    """Trimmed, non-blank entries of a raw JSON array. A bare string counts as one entry."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    cleaned = [clean_text(item) for item in value]
    return [item for item in cleaned if item]


def normalize_article(candidate: Mapping[str, Any], bias: MediaBias) -> AnalyzedArticle:
    title = clean_text(candidate.get("title"))
    summary = clean_text(candidate.get("summary"))

    keywords = clean_list(candidate.get("keywords"))[:MAX_ARTICLE_KEYWORDS]
    evidence = clean_list(candidate.get("evidence"))[:MAX_ARTICLE_EVIDENCE]

    return AnalyzedArticle(
        title=title or TITLE_PLACEHOLDER,
        source=clean_text(candidate.get("source")) or SOURCE_PLACEHOLDER,
        bias=MediaBias(bias),
        url=clean_text(candidate.get("url")),
        publishedDate=clean_text(candidate.get("publishedDate")),
        keywords=keywords or [KEYWORDS_PLACEHOLDER],
        mainClaim=clean_text(candidate.get("mainClaim")) or summary or MAIN_CLAIM_PLACEHOLDER,
        evidence=evidence or [EVIDENCE_PLACEHOLDER],
        summary=summary or title or SUMMARY_PLACEHOLDER,
    )


def normalize_common_keywords(value: Any) -> List[str]:
    # Unique within the group, first occurrence wins
    keywords = list(dict.fromkeys(clean_list(value)))
    return keywords or [COMMON_KEYWORDS_PLACEHOLDER]


def fallback_trend(bias: MediaBias, keyword: str) -> str:
    bias = MediaBias(bias)
    return f'{get_bias_label(bias)} 언론({bias.value}) "{keyword}" 관련 보도'

# services/trending_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config import settings
from schemas.news_analysis import PerplexityCredential
from schemas.trending import TrendingResponse
from services.article_normalizer import clean_list, clean_text
from services.perplexity_service import create_perplexity_client, run_search_completion
from services.prompt_builder import build_trending_prompts
from services.response_parser import load_json_object

logger = logging.getLogger(__name__)


# Shown when the model answer cannot be parsed
FALLBACK_TRENDING = {
    "keywords": ["의대증원", "금리인하", "부동산", "AI", "총선"],
    "descriptions": {
        "의대증원": "의료계 이슈",
        "금리인하": "경제 정책",
        "부동산": "주택 시장",
        "AI": "인공지능",
        "총선": "정치 이슈",
    },
}


def parse_trending_response(raw: str) -> Optional[Dict[str, Any]]:
    """Keywords and descriptions from the model answer, or None if unusable."""
    data = load_json_object(raw or "")
    if data is None:
        return None

    keywords = clean_list(data.get("keywords"))
    if not keywords:
        return None

    raw_descriptions = data.get("descriptions")
    descriptions: Dict[str, str] = {}
    if isinstance(raw_descriptions, dict):
        for key, value in raw_descriptions.items():
            text = clean_text(value)
            if text:
                descriptions[clean_text(key)] = text

    return {"keywords": keywords, "descriptions": descriptions}


async def fetch_trending_keywords(credential: PerplexityCredential) -> TrendingResponse:
    """
    Ask Perplexity for today's top Korean news keywords.

    Provider errors propagate to the caller; an unparseable answer falls back
    to FALLBACK_TRENDING.
    """
    system_prompt, user_prompt = build_trending_prompts()

    async with create_perplexity_client(credential.apiKey) as client:
        raw = await run_search_completion(
            client,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            model=settings.PERPLEXITY_TRENDING_MODEL,
            temperature=0.3,
            max_tokens=1000,
        )

    parsed = parse_trending_response(raw)
    if parsed is None:
        logger.error(f"Trending keywords parsing failed: {raw[:300]!r}")
        parsed = FALLBACK_TRENDING

    keywords: List[str] = list(parsed["keywords"])
    return TrendingResponse(
        keywords=keywords,
        descriptions=dict(parsed["descriptions"]),
        updatedAt=datetime.now(timezone.utc).isoformat(),
    )

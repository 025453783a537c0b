# services/analysis_service.py
import asyncio
import logging
from typing import Optional, Tuple

import openai
from openai import AsyncOpenAI

from config import settings
from schemas.news_analysis import (
    AnalysisResult,
    DateRange,
    MediaBias,
    PerplexityCredential,
    SearchResult,
)
from services.exceptions import BothGroupsEmptyError, CredentialError
from services.media_sources import (
    get_bias_label,
    get_domains_by_bias,
    get_media_names_by_bias,
)
from services.perplexity_service import create_perplexity_client, run_search_completion
from services.prompt_builder import build_search_prompts
from services.response_parser import failed_search_result, parse_search_response

logger = logging.getLogger(__name__)


CREDENTIAL_ERROR_MARKERS = ("401", "unauthorized", "invalid")


def is_credential_error(error: BaseException) -> bool:
    """True when the provider rejected the API key rather than failing for another reason."""
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    message = str(error).lower()
    return any(marker in message for marker in CREDENTIAL_ERROR_MARKERS)


async def search_and_analyze_news(
    client: AsyncOpenAI,
    keyword: str,
    bias: MediaBias,
    start_date: str,
    end_date: str,
) -> SearchResult:
    """
    One bias group's pipeline: prompt -> Perplexity -> parse.

    Provider errors propagate; parse problems never do.
    """
    label = get_bias_label(bias)
    system_prompt, user_prompt = build_search_prompts(
        keyword,
        start_date,
        end_date,
        bias,
        get_media_names_by_bias(bias),
    )

    logger.info(f"=== {label} media search started: {keyword!r} ({start_date} ~ {end_date}) ===")

    raw = await run_search_completion(
        client,
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        model=settings.PERPLEXITY_SEARCH_MODEL,
        temperature=settings.PERPLEXITY_TEMPERATURE,
        max_tokens=settings.PERPLEXITY_MAX_TOKENS,
        domain_filter=get_domains_by_bias(bias),
        recency_filter=settings.PERPLEXITY_RECENCY_FILTER,
    )

    result = parse_search_response(raw, bias, keyword)
    logger.info(f"{label} search finished: {len(result.articles)} articles")
    return result


async def _run_group(
    client: AsyncOpenAI,
    keyword: str,
    bias: MediaBias,
    start_date: str,
    end_date: str,
) -> Tuple[SearchResult, Optional[Exception]]:
    # A failing group becomes an empty result so the sibling group still completes
    try:
        result = await search_and_analyze_news(client, keyword, bias, start_date, end_date)
        return result, None
    except Exception as e:
        logger.error(f"{get_bias_label(bias)} media search failed: {e}")
        return failed_search_result(bias, e), e


async def run_comparison(
    keyword: str,
    start_date: str,
    end_date: str,
    credential: PerplexityCredential,
) -> AnalysisResult:
    """
    Search progressive and conservative outlets concurrently and merge the results.

    One empty side is a valid outcome. Raises:
        CredentialError: both sides are empty and the provider rejected the key.
        BothGroupsEmptyError: both sides are empty for any other reason.
    """
    logger.info(f"=== Parallel progressive/conservative search ({credential.source.value} key) ===")

    async with create_perplexity_client(credential.apiKey) as client:
        (progressive, progressive_error), (conservative, conservative_error) = await asyncio.gather(
            _run_group(client, keyword, MediaBias.PROGRESSIVE, start_date, end_date),
            _run_group(client, keyword, MediaBias.CONSERVATIVE, start_date, end_date),
        )

    logger.info(
        f"Search complete - progressive: {len(progressive.articles)}, "
        f"conservative: {len(conservative.articles)}"
    )

    if not progressive.articles and not conservative.articles:
        credential_errors = [
            e for e in (progressive_error, conservative_error)
            if e is not None and is_credential_error(e)
        ]
        if credential_errors:
            raise CredentialError(str(credential_errors[0]))
        raise BothGroupsEmptyError(f"No articles found for {keyword!r} in either group")

    return AnalysisResult(
        progressive=progressive,
        conservative=conservative,
        searchQuery=keyword,
        dateRange=DateRange(start=start_date, end=end_date),
    )

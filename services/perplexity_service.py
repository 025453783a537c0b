# services/perplexity_service.py
import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import AsyncOpenAI

from config import settings

logger = logging.getLogger(__name__)


def create_perplexity_client(api_key: str) -> AsyncOpenAI:
    """
    Build a Perplexity client for one request.

    Perplexity speaks the OpenAI chat/completions protocol, so the OpenAI SDK
    is pointed at its base URL. The key is passed in explicitly (admin key or
    the guest's own key); callers close the client with `async with`.
    """
    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.PERPLEXITY_BASE_URL,
        http_client=httpx.AsyncClient(timeout=settings.PERPLEXITY_TIMEOUT_SECONDS),
    )


async def run_search_completion(
    client: AsyncOpenAI,
    *,
    system_prompt: str,
    user_prompt: str,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    domain_filter: Optional[List[str]] = None,
    recency_filter: Optional[str] = None,
) -> str:
    """
    Call a Perplexity chat model and return the raw content string.

    - model / temperature / max_tokens: override the defaults from settings
    - domain_filter: restrict web search to these domains
    - recency_filter: "hour", "day", "week", "month" or "year"

    Transport, auth and rate-limit errors are raised as the SDK's exceptions.
    """
    m = model or settings.PERPLEXITY_SEARCH_MODEL
    t = settings.PERPLEXITY_TEMPERATURE if temperature is None else temperature
    n = max_tokens or settings.PERPLEXITY_MAX_TOKENS

    messages: List[Dict[str, str]] = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]

    # Perplexity-only parameters, not part of the OpenAI signature
    extra_body: Dict[str, Any] = {
        "return_citations": False,
        "return_related_questions": False,
    }
    if domain_filter:
        extra_body["search_domain_filter"] = domain_filter
    if recency_filter:
        extra_body["search_recency_filter"] = recency_filter

    completion = await client.chat.completions.create(
        model=m,
        messages=messages,
        temperature=t,
        max_tokens=n,
        extra_body=extra_body,
    )

    if not completion.choices:
        logger.warning(f"Perplexity returned no choices (model={m})")
        return ""
    return completion.choices[0].message.content or ""

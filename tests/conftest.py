import json
from typing import Callable

import pytest

from config import settings
from schemas.news_analysis import CredentialSource, PerplexityCredential


@pytest.fixture
def guest_credential() -> PerplexityCredential:
    return PerplexityCredential(source=CredentialSource.GUEST, apiKey="pplx-test-key")


@pytest.fixture
def admin_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ADMIN_ID", "admin")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "secret")
    monkeypatch.setattr(settings, "PERPLEXITY_API_KEY", "pplx-server-key")


@pytest.fixture
def make_payload() -> Callable[..., str]:
    """Serialized model answer with one article per title."""

    def _make(*titles: str, source: str = "언론사") -> str:
        return json.dumps(
            {
                "articles": [
                    {"title": t, "source": source, "url": f"https://example.com/{i}"}
                    for i, t in enumerate(titles)
                ],
                "commonKeywords": ["공통"],
                "overallTrend": "논조",
            },
            ensure_ascii=False,
        )

    return _make


# services/auth_service.py
import logging
import secrets
from typing import Optional

from config import settings
from schemas.news_analysis import CredentialSource, PerplexityCredential
from services.exceptions import (
    AdminNotConfiguredError,
    MissingApiKeyError,
    ServerCredentialMissingError,
)

logger = logging.getLogger(__name__)


def verify_admin(username: str, password: str) -> bool:
    """Check a login against the single static admin account."""
    if not settings.ADMIN_ID or not settings.ADMIN_PASSWORD:
        raise AdminNotConfiguredError("ADMIN_ID / ADMIN_PASSWORD are not configured")

    id_ok = secrets.compare_digest(username.encode(), settings.ADMIN_ID.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
    return id_ok and password_ok


def resolve_credential(is_admin: bool, api_key: Optional[str]) -> PerplexityCredential:
    """
    Pick the Perplexity key for a request.

    Admin sessions use the server key from settings; guests must send their own.
    """
    if is_admin:
        if not settings.PERPLEXITY_API_KEY:
            raise ServerCredentialMissingError("PERPLEXITY_API_KEY is not configured")
        return PerplexityCredential(
            source=CredentialSource.ADMIN,
            apiKey=settings.PERPLEXITY_API_KEY,
        )

    guest_key = (api_key or "").strip()
    if not guest_key:
        raise MissingApiKeyError("Guest request without an API key")
    return PerplexityCredential(source=CredentialSource.GUEST, apiKey=guest_key)

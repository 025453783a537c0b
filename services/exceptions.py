# services/exceptions.py
"""
Errors the service layer lets escape to the HTTP routes.

Parse failures and single-group call failures never show up here: the parser
and the orchestrator turn those into empty SearchResult values.
"""


class NewsAnalysisError(Exception):
    """Base class for errors reported to the API caller."""
    pass


class CredentialError(NewsAnalysisError):
    """The model provider rejected the API key."""
    pass


class BothGroupsEmptyError(NewsAnalysisError):
    """Neither the progressive nor the conservative search found any article."""
    pass


class MissingApiKeyError(NewsAnalysisError):
    """A guest request arrived without its own API key."""
    pass


class ServerCredentialMissingError(NewsAnalysisError):
    """Admin mode was requested but the server has no API key configured."""
    pass


class AdminNotConfiguredError(NewsAnalysisError):
    """ADMIN_ID / ADMIN_PASSWORD are not set."""
    pass

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server-side Perplexity key, used only for admin sessions.
    # Guests supply their own key with each request.
    PERPLEXITY_API_KEY: str = ""
    PERPLEXITY_BASE_URL: str = "https://api.perplexity.ai"
    PERPLEXITY_SEARCH_MODEL: str = "sonar-pro"
    PERPLEXITY_TRENDING_MODEL: str = "sonar"
    PERPLEXITY_TEMPERATURE: float = 0.1
    PERPLEXITY_MAX_TOKENS: int = 8000
    # One of "hour", "day", "week", "month", "year"
    PERPLEXITY_RECENCY_FILTER: str = "month"
    PERPLEXITY_TIMEOUT_SECONDS: float = 60.0

    # Static admin login. Leave empty to disable admin mode.
    ADMIN_ID: str = ""
    ADMIN_PASSWORD: str = ""

    class Config:
        env_file = ".env"


settings = Settings()

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class MediaBias(str, Enum):
    PROGRESSIVE = "progressive"
    CONSERVATIVE = "conservative"


class CredentialSource(str, Enum):
    ADMIN = "admin"
    GUEST = "guest"


class MediaSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    bias: MediaBias
    domain: Optional[str] = None


class AnalyzedArticle(BaseModel):
    # Build these through services.article_normalizer.normalize_article
    title: str
    source: str
    bias: MediaBias
    url: str
    publishedDate: str
    keywords: List[str]
    mainClaim: str
    evidence: List[str]
    summary: str


class SearchResult(BaseModel):
    articles: List[AnalyzedArticle]
    commonKeywords: List[str]
    overallTrend: str


class DateRange(BaseModel):
    start: str
    end: str


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    progressive: SearchResult
    conservative: SearchResult
    searchQuery: str
    dateRange: DateRange


class PerplexityCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: CredentialSource
    apiKey: str


class AnalyzeRequest(BaseModel):
    keyword: str = ""
    startDate: str = ""
    endDate: str = ""
    apiKey: Optional[str] = None
    isAdmin: bool = False

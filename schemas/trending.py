from pydantic import BaseModel
from typing import Dict, List, Optional


class TrendingRequest(BaseModel):
    apiKey: Optional[str] = None
    isAdmin: bool = False


class TrendingResponse(BaseModel):
    keywords: List[str]
    descriptions: Dict[str, str]
    updatedAt: str

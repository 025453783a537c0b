import logging
from fastapi import APIRouter, HTTPException

from schemas.trending import TrendingRequest, TrendingResponse
from services.analysis_service import is_credential_error
from services.auth_service import resolve_credential
from services.exceptions import MissingApiKeyError, ServerCredentialMissingError
from services.trending_service import fetch_trending_keywords

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/trending", response_model=TrendingResponse)
async def trending(req: TrendingRequest):
    """
    Today's most covered Korean news keywords, for the search suggestions.
    """
    try:
        credential = resolve_credential(req.isAdmin, req.apiKey)
    except ServerCredentialMissingError:
        raise HTTPException(status_code=500, detail="서버에 API 키가 설정되지 않았습니다.")
    except MissingApiKeyError:
        raise HTTPException(status_code=400, detail="API 키를 입력해주세요.")

    try:
        return await fetch_trending_keywords(credential)
    except Exception as e:
        logger.error(f"Trending error: {e}")
        if is_credential_error(e):
            raise HTTPException(
                status_code=401,
                detail="API 키가 유효하지 않습니다. 올바른 Perplexity API 키를 입력해주세요.",
            )
        raise HTTPException(
            status_code=500,
            detail="인기 키워드를 가져오는 중 오류가 발생했습니다.",
        )

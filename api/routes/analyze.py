import logging
from fastapi import APIRouter, HTTPException

from schemas.news_analysis import AnalysisResult, AnalyzeRequest
from services.analysis_service import is_credential_error, run_comparison
from services.auth_service import resolve_credential
from services.exceptions import (
    BothGroupsEmptyError,
    CredentialError,
    MissingApiKeyError,
    ServerCredentialMissingError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(req: AnalyzeRequest):
    """
    Compare how progressive and conservative outlets cover a keyword.
    """
    keyword = req.keyword.strip()
    if not keyword:
        raise HTTPException(status_code=400, detail="검색 키워드를 입력해주세요.")

    try:
        credential = resolve_credential(req.isAdmin, req.apiKey)
    except ServerCredentialMissingError:
        raise HTTPException(
            status_code=500,
            detail="서버에 Perplexity API 키가 설정되지 않았습니다.",
        )
    except MissingApiKeyError:
        raise HTTPException(status_code=400, detail="API 키를 입력해주세요.")

    try:
        return await run_comparison(keyword, req.startDate, req.endDate, credential)
    except CredentialError as e:
        logger.warning(f"Rejected Perplexity API key: {e}")
        raise HTTPException(
            status_code=401,
            detail="API 키가 유효하지 않습니다. 올바른 Perplexity API 키를 입력해주세요.",
        )
    except BothGroupsEmptyError as e:
        logger.info(str(e))
        raise HTTPException(
            status_code=404,
            detail="진보와 보수 언론 모두에서 기사를 찾을 수 없었습니다. 키워드나 날짜 범위를 변경해보세요.",
        )
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        if is_credential_error(e):
            raise HTTPException(
                status_code=401,
                detail="API 키가 유효하지 않습니다. 올바른 Perplexity API 키를 입력해주세요.",
            )
        raise HTTPException(
            status_code=500,
            detail="뉴스 분석 중 오류가 발생했습니다.",
        )

import logging
from fastapi import APIRouter, HTTPException

from schemas.auth import LoginRequest, LoginResponse
from services.auth_service import verify_admin
from services.exceptions import AdminNotConfiguredError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/auth", response_model=LoginResponse)
def login(req: LoginRequest):
    """
    Admin login. Guests skip this and send their own API key instead.
    """
    try:
        ok = verify_admin(req.username, req.password)
    except AdminNotConfiguredError:
        logger.error("Admin login attempted but no admin account is configured")
        raise HTTPException(status_code=500, detail="관리자 계정이 설정되지 않았습니다.")

    if not ok:
        logger.info("Admin login failed")
        raise HTTPException(status_code=401, detail="아이디 또는 비밀번호가 올바르지 않습니다.")

    return LoginResponse(success=True, isAdmin=True, message="관리자 로그인 성공")

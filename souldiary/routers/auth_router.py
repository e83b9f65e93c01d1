import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from souldiary.deps import get_auth_service
from souldiary.schemas.auth import LoginRequest, SignupRequest
from souldiary.schemas.common import BaseResponse
from souldiary.services.auth_service import AuthService

router = APIRouter(tags=["authentication"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=BaseResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> Any:
    """회원 가입 - 가입 코인이 함께 지급된다"""
    auth_service.signup(request)
    return BaseResponse(success=True, message="Signup successful")


@router.post("/login", response_model=BaseResponse)
def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> Any:
    """로그인 - 1시간 유효한 액세스 토큰 발급"""
    result = auth_service.login(request)
    return BaseResponse(
        success=True,
        message="Login successful",
        data={"token": result.token, "user": result.user.model_dump()},
    )

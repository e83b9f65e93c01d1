import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from souldiary.core.auth_middleware import get_current_identity
from souldiary.deps import get_coin_service, get_user_service
from souldiary.schemas.auth import ChangePasswordRequest, TokenIdentity
from souldiary.schemas.common import BaseResponse
from souldiary.services.coin_service import CoinService
from souldiary.services.user_service import UserService

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)


@router.get("/get-user-info", response_model=BaseResponse)
def get_user_info(
    identity: TokenIdentity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
) -> Any:
    """현재 사용자 정보 (코인 잔액 포함)"""
    user_info = user_service.get_user_info(identity.user_id)
    return BaseResponse(success=True, message="OK", data={"user": user_info.model_dump()})


@router.post("/change-password", response_model=BaseResponse)
def change_password(
    request: ChangePasswordRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
) -> Any:
    user_service.change_password(
        identity.user_id, request.current_password, request.new_password
    )
    return BaseResponse(success=True, message="Password changed successfully")


@router.get("/get-coin-history", response_model=BaseResponse)
def get_coin_history(
    limit: int = Query(50, ge=1, le=100, description="페이지 크기"),
    offset: int = Query(0, ge=0, description="오프셋"),
    identity: TokenIdentity = Depends(get_current_identity),
    coin_service: CoinService = Depends(get_coin_service),
) -> Any:
    """코인 변동 내역 (최신순)"""
    history = coin_service.get_history(identity.user_id, limit=limit, offset=offset)
    return BaseResponse(success=True, message="OK", data=history.model_dump())

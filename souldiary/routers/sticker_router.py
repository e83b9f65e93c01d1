import logging
from typing import Any

from fastapi import APIRouter, Depends

from souldiary.core.auth_middleware import get_current_identity
from souldiary.deps import get_sticker_service
from souldiary.schemas.auth import TokenIdentity
from souldiary.schemas.common import BaseResponse
from souldiary.schemas.sticker import PurchaseRequest
from souldiary.services.sticker_service import StickerService

router = APIRouter(tags=["stickers"])
logger = logging.getLogger(__name__)


@router.get("/get-stickers", response_model=BaseResponse)
def get_stickers(
    sticker_service: StickerService = Depends(get_sticker_service),
) -> Any:
    """스티커 카탈로그 (인증 불필요)"""
    stickers = sticker_service.list_stickers()
    return BaseResponse(
        success=True, message="OK", data={"stickers": [s.model_dump() for s in stickers]}
    )


@router.post("/buy-sticker", response_model=BaseResponse)
def buy_sticker(
    request: PurchaseRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    sticker_service: StickerService = Depends(get_sticker_service),
) -> Any:
    """스티커 구매

    HTTP Status:
        200: 구매 성공
        400: 필드 누락 또는 잔액 부족
        404: 없는 스티커
        409: 이미 보유한 스티커
    """
    result = sticker_service.purchase_sticker(
        identity.user_id, request.sticker_id, claimed_price=request.price
    )
    return BaseResponse(success=True, message="Sticker purchased", data=result.model_dump())


@router.get("/get-user-stickers", response_model=BaseResponse)
def get_user_stickers(
    identity: TokenIdentity = Depends(get_current_identity),
    sticker_service: StickerService = Depends(get_sticker_service),
) -> Any:
    """보유 스티커 목록 - 하나도 없으면 404"""
    stickers = sticker_service.get_user_stickers(identity.user_id)
    return BaseResponse(
        success=True,
        message="OK",
        data={"stickers": [s.model_dump(mode="json") for s in stickers]},
    )

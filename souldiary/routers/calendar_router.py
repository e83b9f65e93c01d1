import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from souldiary.core.auth_middleware import get_current_identity
from souldiary.deps import get_calendar_service
from souldiary.schemas.auth import TokenIdentity
from souldiary.schemas.calendar import ApplyStickerRequest, MoodColorRequest
from souldiary.schemas.common import BaseResponse
from souldiary.services.calendar_service import CalendarService

router = APIRouter(tags=["calendar"])


@router.post("/set-mood-color", response_model=BaseResponse)
def set_mood_color(
    request: MoodColorRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> Any:
    day = calendar_service.set_mood_color(
        identity.user_id, request.date, request.color, request.sticker_id
    )
    return BaseResponse(success=True, message="Mood color set", data=day.model_dump(mode="json"))


@router.get("/get-mood-color", response_model=BaseResponse)
def get_mood_color(
    date: datetime.date = Query(..., description="조회할 날짜 (YYYY-MM-DD)"),
    identity: TokenIdentity = Depends(get_current_identity),
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> Any:
    """해당 날짜 기록이 없으면 오류가 아니라 success=False 와 "no data" 메시지"""
    day = calendar_service.get_day(identity.user_id, date)
    if day is None:
        return BaseResponse(
            success=False,
            message="No data for this date",
            data={"date": date.isoformat(), "color": None, "sticker_id": None},
        )
    return BaseResponse(success=True, message="OK", data=day.model_dump(mode="json"))


@router.get("/get-user-calendar", response_model=BaseResponse)
def get_user_calendar(
    year: Optional[int] = Query(None, ge=1, le=9998),
    month: Optional[int] = Query(None, ge=1, le=12),
    identity: TokenIdentity = Depends(get_current_identity),
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> Any:
    days = calendar_service.get_calendar(identity.user_id, year=year, month=month)
    return BaseResponse(
        success=True, message="OK", data=[d.model_dump(mode="json") for d in days]
    )


@router.post("/apply-sticker", response_model=BaseResponse)
def apply_sticker(
    request: ApplyStickerRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    calendar_service: CalendarService = Depends(get_calendar_service),
) -> Any:
    day = calendar_service.apply_sticker(identity.user_id, request.date, request.sticker_id)
    return BaseResponse(success=True, message="Sticker applied", data=day.model_dump(mode="json"))

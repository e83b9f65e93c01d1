import datetime
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from souldiary.config import Settings
from souldiary.core.exceptions import NotFoundError, StickerNotOwnedError, ValidationError
from souldiary.repositories.calendar_repository import CalendarRepository
from souldiary.repositories.sticker_repository import StickerRepository
from souldiary.schemas.calendar import CalendarDay

logger = logging.getLogger(__name__)


class CalendarService:
    """날짜별 무드 색상/스티커 기록 - (user_id, date)당 한 행만 존재"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.calendar_repo = CalendarRepository(db)
        self.sticker_repo = StickerRepository(db)

    def _check_sticker(self, user_id: str, sticker_id: int) -> None:
        if self.sticker_repo.get_sticker(sticker_id) is None:
            raise NotFoundError("Sticker not found")
        if self.settings.REQUIRE_STICKER_OWNERSHIP and not self.sticker_repo.owns(
            user_id, sticker_id
        ):
            raise StickerNotOwnedError(details={"sticker_id": sticker_id})

    def set_mood_color(
        self,
        user_id: str,
        day: datetime.date,
        color: str,
        sticker_id: Optional[int] = None,
    ) -> CalendarDay:
        """무드 색상 설정 (스티커는 전달된 경우에만 함께 갱신)"""
        fields = {"color": color}
        if sticker_id is not None:
            self._check_sticker(user_id, sticker_id)
            fields["sticker_id"] = sticker_id

        result = self.calendar_repo.upsert_day(user_id, day, fields)
        logger.info(f"Set mood color {color} for user {user_id} on {day}")
        return result

    def apply_sticker(
        self, user_id: str, day: datetime.date, sticker_id: int
    ) -> CalendarDay:
        """스티커만 갱신 - 기존 색상은 그대로 유지"""
        self._check_sticker(user_id, sticker_id)
        result = self.calendar_repo.upsert_day(user_id, day, {"sticker_id": sticker_id})
        logger.info(f"Applied sticker {sticker_id} for user {user_id} on {day}")
        return result

    def get_day(self, user_id: str, day: datetime.date) -> Optional[CalendarDay]:
        return self.calendar_repo.get_day(user_id, day)

    def get_calendar(
        self, user_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> List[CalendarDay]:
        if month is not None and year is None:
            raise ValidationError("month requires year")

        start = end = None
        if year is not None:
            if month is None:
                start, end = datetime.date(year, 1, 1), datetime.date(year + 1, 1, 1)
            else:
                start = datetime.date(year, month, 1)
                end = (
                    datetime.date(year + 1, 1, 1)
                    if month == 12
                    else datetime.date(year, month + 1, 1)
                )
        return self.calendar_repo.list_days(user_id, start, end)

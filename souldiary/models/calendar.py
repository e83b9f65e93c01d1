import datetime
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from souldiary.models.base import BaseModel, IdType


class CalendarDay(BaseModel):
    """사용자별 날짜 상태 (무드 색상 + 적용한 스티커) - (user_id, date)당 1행"""

    __tablename__ = "calendar"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_calendar_user_date"),
    )

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.login_id"), nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    color: Mapped[Optional[str]] = mapped_column(String(7), nullable=True)
    sticker_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("stickers.id"), nullable=True
    )

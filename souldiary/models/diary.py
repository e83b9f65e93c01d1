import datetime

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from souldiary.models.base import BaseModel, IdType


class Diary(BaseModel):
    __tablename__ = "diaries"
    __table_args__ = (Index("idx_diaries_user_date", "user_id", "date"),)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.login_id"), nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    one: Mapped[str] = mapped_column(String(255), nullable=False, default="")  # 한 줄 요약
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<Diary(id={self.id}, user_id={self.user_id}, date={self.date})>"

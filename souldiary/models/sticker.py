"""
스티커 카탈로그와 보유 스티커 모델

- stickers: 판매 중인 스티커 목록 (읽기 전용, 시드 스크립트로 적재)
- user_stickers: 사용자가 구매한 스티커 (추가 전용, 사용자당 스티커 1개)
"""

from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from souldiary.models.base import BaseModel, IdType


class Sticker(BaseModel):
    __tablename__ = "stickers"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_stickers_price_non_negative"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)


class UserSticker(BaseModel):
    __tablename__ = "user_stickers"
    __table_args__ = (
        # 같은 스티커를 두 번 구매할 수 없음
        UniqueConstraint("user_id", "sticker_id", name="uq_user_sticker"),
    )

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.login_id"), nullable=False, index=True
    )
    sticker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stickers.id"), nullable=False
    )
    price_paid: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

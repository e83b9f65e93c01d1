from sqlalchemy import BigInteger, CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from souldiary.models.base import BaseModel, IdType


class User(BaseModel):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint("coin >= 0", name="ck_users_coin_non_negative"),)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    # 로그인 아이디 - 토큰에 담기는 사용자 식별자
    login_id: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    coin: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, login_id={self.login_id}, coin={self.coin})>"

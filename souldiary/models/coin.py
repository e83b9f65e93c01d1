"""
코인 원장 데이터 모델

사용자 코인의 모든 변동 내역을 기록하는 원장(Ledger) 테이블.
잔액 자체는 users.coin 에 있고, 이 테이블은 같은 트랜잭션 안에서 함께 기록되는 감사 추적이다.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, String, Text
from sqlalchemy.schema import UniqueConstraint

from souldiary.models.base import BaseModel, IdType


class CoinLedger(BaseModel):
    __tablename__ = "coin_ledger"
    __table_args__ = (UniqueConstraint("ref_id", name="uq_coin_ledger_ref_id"),)

    id = Column(IdType, primary_key=True, autoincrement=True)
    user_id = Column(String(100), ForeignKey("users.login_id"), nullable=False, index=True)

    # 코인 변동량 - 양수면 지급, 음수면 차감
    delta = Column(BigInteger, nullable=False)

    # 변동 사유 (예: "Signup bonus", "Sticker purchase: 하트")
    reason = Column(Text, nullable=False)

    # 중복 기록 방지용 참조 ID (예: "signup_bonus_alice", "sticker_purchase_alice_7")
    ref_id = Column(Text, nullable=False)

    # 이 변동 직후의 잔액
    balance_after = Column(BigInteger, nullable=False)

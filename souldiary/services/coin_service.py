import logging

from sqlalchemy.orm import Session

from souldiary.core.exceptions import (
    InsufficientBalanceError,
    NotFoundError,
    ValidationError,
)
from souldiary.repositories.coin_repository import CoinRepository
from souldiary.schemas.coin import CoinHistory

logger = logging.getLogger(__name__)


class CoinService:
    """코인 잔액을 변경할 수 있는 유일한 서비스

    credit/debit 은 커밋하지 않는다. 구매처럼 다른 기록과 함께 묶여야 하는 변경이므로
    호출자가 같은 세션에서 commit/rollback 한다.
    """

    def __init__(self, db: Session):
        self.db = db
        self.coin_repo = CoinRepository(db)

    def get_balance(self, user_id: str) -> int:
        balance = self.coin_repo.get_balance(user_id)
        if balance is None:
            raise NotFoundError("User not found")
        return balance

    def debit(self, user_id: str, amount: int, reason: str, ref_id: str) -> int:
        """잔액 >= amount 일 때만 차감. 부족하면 InsufficientBalanceError 이고 아무것도 변경하지 않음"""
        if amount < 0:
            raise ValidationError("Debit amount must not be negative")

        balance_after = self.coin_repo.apply_delta(user_id, -amount, reason, ref_id)
        if balance_after is None:
            available = self.coin_repo.get_balance(user_id)
            if available is None:
                raise NotFoundError("User not found")
            raise InsufficientBalanceError(
                f"Insufficient balance. Required: {amount}, Available: {available}",
                details={"required": amount, "available": available},
            )

        logger.info(f"Debited {amount} coin from user {user_id} ({reason}), balance {balance_after}")
        return balance_after

    def credit(self, user_id: str, amount: int, reason: str, ref_id: str) -> int:
        if amount <= 0:
            raise ValidationError("Credit amount must be positive")

        balance_after = self.coin_repo.apply_delta(user_id, amount, reason, ref_id)
        if balance_after is None:
            raise NotFoundError("User not found")

        logger.info(f"Credited {amount} coin to user {user_id} ({reason}), balance {balance_after}")
        return balance_after

    def get_history(self, user_id: str, limit: int = 50, offset: int = 0) -> CoinHistory:
        if limit > 100:
            limit = 100
        return self.coin_repo.get_history(user_id=user_id, limit=limit, offset=offset)

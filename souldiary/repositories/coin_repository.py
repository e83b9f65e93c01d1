"""
코인 리포지토리 - 잔액과 원장

핵심 규칙:
- 잔액(users.coin)은 이 리포지토리의 apply_delta 로만 변경된다
- 차감은 "잔액 >= 금액" 조건부 UPDATE 한 문장으로 수행되어 음수 잔액이 불가능하다
- 모든 변동은 같은 트랜잭션 안에서 원장(coin_ledger)에 기록된다
- 커밋하지 않는다. 커밋/롤백은 호출자의 작업 단위가 결정한다
"""

from typing import Optional

from sqlalchemy import desc, select, update
from sqlalchemy.orm import Session

from souldiary.models.coin import CoinLedger as CoinLedgerModel
from souldiary.models.user import User as UserModel
from souldiary.repositories.base import BaseRepository
from souldiary.schemas.coin import CoinHistory, CoinLedgerEntry


class CoinRepository(BaseRepository[CoinLedgerModel, CoinLedgerEntry]):
    def __init__(self, db: Session):
        super().__init__(CoinLedgerModel, CoinLedgerEntry, db)

    def _to_schema(self, model_instance: CoinLedgerModel) -> Optional[CoinLedgerEntry]:
        if model_instance is None:
            return None

        delta = model_instance.delta
        return CoinLedgerEntry(
            id=model_instance.id,
            transaction_type="CREDIT" if delta > 0 else "DEBIT",
            delta=delta,
            balance_after=model_instance.balance_after,
            reason=model_instance.reason,
            ref_id=model_instance.ref_id,
            created_at=(
                model_instance.created_at.strftime("%Y-%m-%d %H:%M:%S")
                if model_instance.created_at
                else ""
            ),
        )

    def get_balance(self, user_id: str) -> Optional[int]:
        """현재 잔액 조회 (사용자가 없으면 None)"""
        return self.db.execute(
            select(UserModel.coin).where(UserModel.login_id == user_id)
        ).scalar_one_or_none()

    def apply_delta(
        self, user_id: str, delta: int, reason: str, ref_id: str
    ) -> Optional[int]:
        """잔액 변경 + 원장 기록

        Returns:
            변경 후 잔액. 차감인데 잔액이 부족하거나 사용자가 없으면 None (아무것도 변경하지 않음)
        """
        stmt = update(UserModel).where(UserModel.login_id == user_id)
        if delta < 0:
            stmt = stmt.where(UserModel.coin >= -delta)
        stmt = stmt.values(coin=UserModel.coin + delta).execution_options(
            synchronize_session=False
        )

        result = self.db.execute(stmt)
        if result.rowcount == 0:
            return None

        balance_after = self.get_balance(user_id)
        self.db.add(
            self.model_class(
                user_id=user_id,
                delta=delta,
                reason=reason,
                ref_id=ref_id,
                balance_after=balance_after,
            )
        )
        self.db.flush()
        return balance_after

    def get_history(self, user_id: str, limit: int = 50, offset: int = 0) -> CoinHistory:
        """사용자 코인 원장 조회 (최신순, 페이징)"""
        query = self.db.query(self.model_class).filter(
            self.model_class.user_id == user_id
        )
        total_count = query.count()
        model_instances = (
            query.order_by(desc(self.model_class.id)).limit(limit).offset(offset).all()
        )

        return CoinHistory(
            balance=self.get_balance(user_id) or 0,
            entries=self._to_schemas(model_instances),
            total_count=total_count,
            has_next=offset + limit < total_count,
        )

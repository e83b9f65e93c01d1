import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from souldiary.core.exceptions import (
    AlreadyOwnedError,
    InsufficientBalanceError,
    NotFoundError,
)
from souldiary.repositories.sticker_repository import StickerRepository
from souldiary.repositories.user_repository import UserRepository
from souldiary.schemas.sticker import OwnedSticker, PurchaseResult, Sticker
from souldiary.services.coin_service import CoinService

logger = logging.getLogger(__name__)


class StickerService:
    """스티커 카탈로그 조회와 구매 트랜잭션"""

    def __init__(self, db: Session):
        self.db = db
        self.sticker_repo = StickerRepository(db)
        self.user_repo = UserRepository(db)
        self.coin_service = CoinService(db)

    def list_stickers(self) -> List[Sticker]:
        return self.sticker_repo.list_catalog()

    def get_user_stickers(self, user_id: str) -> List[OwnedSticker]:
        stickers = self.sticker_repo.get_owned_stickers(user_id)
        if not stickers:
            raise NotFoundError("No stickers found")
        return stickers

    def purchase_sticker(
        self, user_id: str, sticker_id: int, claimed_price: Optional[int] = None
    ) -> PurchaseResult:
        """스티커 구매

        하나의 트랜잭션 안에서:
        1. 사용자 행 잠금 후 잔액 확인 (부족하면 변경 없이 실패)
        2. 중복 보유 확인
        3. 보유 스티커 기록
        4. 카탈로그 가격만큼 조건부 차감
        5. 커밋 - 중간에 실패하면 전체 롤백되어 차감과 보유 기록이 따로 남지 않는다
        """
        sticker = self.sticker_repo.get_sticker(sticker_id)
        if sticker is None:
            self.db.rollback()
            raise NotFoundError("Sticker not found")

        price = sticker.price
        if claimed_price is not None and claimed_price != price:
            logger.warning(
                f"Ignoring client price {claimed_price} for sticker {sticker_id} "
                f"(catalog price {price}), user {user_id}"
            )

        try:
            user = self.user_repo.lock_for_update(user_id)
            if user is None:
                raise NotFoundError("User not found")

            if user.coin < price:
                raise InsufficientBalanceError(
                    f"Insufficient balance. Required: {price}, Available: {user.coin}",
                    details={"required": price, "available": user.coin},
                )

            if self.sticker_repo.owns(user_id, sticker_id):
                raise AlreadyOwnedError()

            self.sticker_repo.add_owned(user_id, sticker_id, price_paid=price)
            balance_after = self.coin_service.debit(
                user_id,
                price,
                reason=f"Sticker purchase: {sticker.name}",
                ref_id=f"sticker_purchase_{user_id}_{sticker_id}",
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # 동시에 같은 스티커를 구매한 경우 고유 제약에서 걸린다
            if self.sticker_repo.owns(user_id, sticker_id):
                raise AlreadyOwnedError()
            raise
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"User {user_id} bought sticker {sticker_id} for {price}, balance {balance_after}")
        return PurchaseResult(sticker_id=sticker_id, price=price, balance_after=balance_after)

from typing import List, Optional

from sqlalchemy.orm import Session

from souldiary.models.sticker import Sticker as StickerModel, UserSticker
from souldiary.repositories.base import BaseRepository
from souldiary.schemas.sticker import OwnedSticker, Sticker as StickerSchema


class StickerRepository(BaseRepository[StickerModel, StickerSchema]):
    """스티커 카탈로그(읽기 전용)와 보유 스티커"""

    def __init__(self, db: Session):
        super().__init__(StickerModel, StickerSchema, db)

    def list_catalog(self) -> List[StickerSchema]:
        return self.find_all(order_by="id")

    def get_owned_stickers(self, user_id: str) -> List[OwnedSticker]:
        rows = (
            self.db.query(UserSticker, StickerModel)
            .join(StickerModel, StickerModel.id == UserSticker.sticker_id)
            .filter(UserSticker.user_id == user_id)
            .order_by(UserSticker.id)
            .all()
        )
        return [
            OwnedSticker(
                id=owned.id,
                sticker_id=sticker.id,
                name=sticker.name,
                image=sticker.image,
                price_paid=owned.price_paid,
                acquired_at=owned.created_at,
            )
            for owned, sticker in rows
        ]

    def owns(self, user_id: str, sticker_id: int) -> bool:
        return (
            self.db.query(UserSticker.id)
            .filter(UserSticker.user_id == user_id, UserSticker.sticker_id == sticker_id)
            .first()
            is not None
        )

    def add_owned(self, user_id: str, sticker_id: int, price_paid: int) -> int:
        """보유 스티커 추가 - flush 만 하고 커밋은 호출자 몫"""
        owned = UserSticker(user_id=user_id, sticker_id=sticker_id, price_paid=price_paid)
        self.db.add(owned)
        self.db.flush()
        return owned.id

    def get_sticker(self, sticker_id: int) -> Optional[StickerSchema]:
        return self.get_by_id(sticker_id)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class Sticker(BaseModel):
    id: int
    name: str
    price: int
    image: Optional[str] = None

    class Config:
        from_attributes = True

    # 웹 클라이언트는 sticker_id / image_url 이름으로 읽는다
    @computed_field
    @property
    def sticker_id(self) -> int:
        return self.id

    @computed_field
    @property
    def image_url(self) -> Optional[str]:
        return self.image


class PurchaseRequest(BaseModel):
    sticker_id: int = Field(..., gt=0)
    # 클라이언트가 보낸 가격은 참고용이며 실제 차감액은 카탈로그 가격
    price: Optional[int] = Field(None, ge=0)


class PurchaseResult(BaseModel):
    sticker_id: int
    price: int
    balance_after: int


class OwnedSticker(BaseModel):
    id: int
    sticker_id: int
    name: str
    image: Optional[str] = None
    price_paid: int
    acquired_at: Optional[datetime] = None

    @computed_field
    @property
    def image_url(self) -> Optional[str]:
        return self.image

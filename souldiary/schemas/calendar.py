import datetime
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class MoodColorRequest(BaseModel):
    date: datetime.date
    color: str
    sticker_id: Optional[int] = Field(None, gt=0)

    @field_validator("color")
    @classmethod
    def color_must_be_hex(cls, v: str) -> str:
        v = v.strip()
        if not HEX_COLOR_PATTERN.match(v):
            raise ValueError("Color must be a hex string like #FFABAB")
        return v.upper()


class ApplyStickerRequest(BaseModel):
    sticker_id: int = Field(..., gt=0)
    date: datetime.date


class CalendarDay(BaseModel):
    date: datetime.date
    color: Optional[str] = None
    sticker_id: Optional[int] = None

    class Config:
        from_attributes = True

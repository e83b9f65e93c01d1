import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DiaryCreate(BaseModel):
    date: datetime.date
    title: str = Field(..., min_length=1, max_length=200)
    one: str = Field("", max_length=255, description="한 줄 요약")
    content: str = Field("", description="본문")


class Diary(BaseModel):
    id: int
    user_id: str
    date: datetime.date
    title: str
    one: str
    content: str
    created_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True

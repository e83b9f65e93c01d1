from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: int
    login_id: str
    name: str
    coin: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserInfo(BaseModel):
    """/get-user-info 응답 - 잔액 포함"""

    user_id: str
    name: str
    coin: int

# Repository layer - Data access with Pydantic responses

from .base import BaseRepository
from .user_repository import UserRepository
from .coin_repository import CoinRepository
from .diary_repository import DiaryRepository
from .sticker_repository import StickerRepository
from .calendar_repository import CalendarRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CoinRepository",
    "DiaryRepository",
    "StickerRepository",
    "CalendarRepository",
]

from souldiary.models.base import Base
from souldiary.models.user import User
from souldiary.models.diary import Diary
from souldiary.models.sticker import Sticker, UserSticker
from souldiary.models.calendar import CalendarDay
from souldiary.models.coin import CoinLedger

__all__ = [
    "Base",
    "User",
    "Diary",
    "Sticker",
    "UserSticker",
    "CalendarDay",
    "CoinLedger",
]

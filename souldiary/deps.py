from fastapi import Depends, Request
from sqlalchemy.orm import Session

from souldiary.database.session import get_db

# Services
from souldiary.services.auth_service import AuthService
from souldiary.services.calendar_service import CalendarService
from souldiary.services.coin_service import CoinService
from souldiary.services.diary_service import DiaryService
from souldiary.services.sticker_service import StickerService
from souldiary.services.user_service import UserService


def get_auth_service(request: Request, db: Session = Depends(get_db)) -> AuthService:
    return request.app.container.auth_service(db=db)


def get_user_service(request: Request, db: Session = Depends(get_db)) -> UserService:
    return request.app.container.user_service(db=db)


def get_coin_service(request: Request, db: Session = Depends(get_db)) -> CoinService:
    return request.app.container.coin_service(db=db)


def get_diary_service(request: Request, db: Session = Depends(get_db)) -> DiaryService:
    return request.app.container.diary_service(db=db)


def get_sticker_service(request: Request, db: Session = Depends(get_db)) -> StickerService:
    return request.app.container.sticker_service(db=db)


def get_calendar_service(
    request: Request, db: Session = Depends(get_db)
) -> CalendarService:
    return request.app.container.calendar_service(db=db)

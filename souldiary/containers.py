from dependency_injector import containers, providers

from souldiary.config import Settings
from souldiary.database.connection import create_db_engine, create_session_factory
from souldiary.services.auth_service import AuthService
from souldiary.services.calendar_service import CalendarService
from souldiary.services.coin_service import CoinService
from souldiary.services.diary_service import DiaryService
from souldiary.services.sticker_service import StickerService
from souldiary.services.user_service import UserService


class Container(containers.DeclarativeContainer):
    """Application container.

    엔진/세션 팩토리는 프로세스 단위 싱글톤, 서비스는 요청마다 세션(db)을 받아 생성한다:
    ``container.sticker_service(db=db)``
    """

    config = providers.Singleton(Settings)

    # Database
    engine = providers.Singleton(create_db_engine, settings=config)
    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Services
    auth_service = providers.Factory(AuthService, settings=config)
    user_service = providers.Factory(UserService, settings=config)
    coin_service = providers.Factory(CoinService)
    diary_service = providers.Factory(DiaryService)
    sticker_service = providers.Factory(StickerService)
    calendar_service = providers.Factory(CalendarService, settings=config)

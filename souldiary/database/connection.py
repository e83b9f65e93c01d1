from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from souldiary.config import Settings


def create_db_engine(settings: Settings) -> Engine:
    url = settings.database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,  # 풀 고갈 시 무한 대기 방지
        pool_pre_ping=True,  # 연결 유효성 검사
        pool_recycle=settings.DB_POOL_RECYCLE,
        echo=settings.DEBUG,  # 디버그 모드에서 SQL 로깅
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    # Use expire_on_commit=False to avoid DetachedInstanceError when accessing
    # attributes after commit within the same request scope.
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )

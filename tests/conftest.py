import sys
from pathlib import Path
from typing import Optional

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import event

# Ensure project root is on path for `souldiary` imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from souldiary.config import Settings
from souldiary.containers import Container
from souldiary.core.security import create_identity_token
from souldiary.database.connection import create_db_engine, create_session_factory
from souldiary.main import create_app
from souldiary.models import Base, Sticker
from souldiary.schemas.auth import SignupRequest, TokenIdentity
from souldiary.services.auth_service import AuthService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'souldiary_test.db'}",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)

    # pysqlite 의 자동 BEGIN 을 끄고 BEGIN IMMEDIATE 로 시작해
    # 쓰기 트랜잭션이 서로를 기다리게 한다 (PostgreSQL 행 잠금과 같은 직렬화)
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def container(settings, engine):
    container = Container()
    container.config.override(providers.Object(settings))
    container.engine.override(providers.Object(engine))
    yield container
    container.reset_override()


@pytest.fixture
def client(container):
    app = create_app(container)
    return TestClient(app)


def create_user(
    session_factory,
    settings: Settings,
    user_id: str = "alice",
    name: str = "Alice",
    password: str = "secret-pw",
):
    """가입 API 와 같은 경로로 사용자 생성 (가입 코인 포함)"""
    db = session_factory()
    try:
        return AuthService(db, settings).signup(
            SignupRequest(name=name, user_id=user_id, password=password)
        )
    finally:
        db.close()


def add_sticker(
    session_factory,
    name: str,
    price: int,
    sticker_id: Optional[int] = None,
    image: str = "/stickers/test.png",
) -> int:
    db = session_factory()
    try:
        sticker = Sticker(name=name, price=price, image=image)
        if sticker_id is not None:
            sticker.id = sticker_id
        db.add(sticker)
        db.commit()
        return sticker.id
    finally:
        db.close()


def auth_headers(settings: Settings, user_id: str = "alice", name: str = "Alice") -> dict:
    token = create_identity_token(TokenIdentity(user_id=user_id, name=name), settings)
    return {"Authorization": f"Bearer {token}"}

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError

from souldiary.config import Settings
from souldiary.schemas.auth import BCRYPT_MAX_BYTES, TokenIdentity

logger = logging.getLogger(__name__)


def create_access_token(
    data: dict, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM
    )
    return encoded_jwt


def create_identity_token(
    identity: TokenIdentity, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    """로그인 식별자와 이름을 담은 액세스 토큰 발급"""
    return create_access_token(
        {"sub": identity.user_id, "user_id": identity.user_id, "name": identity.name},
        settings,
        expires_delta,
    )


def decode_access_token(token: str, settings: Settings) -> Optional[TokenIdentity]:
    """JWT 토큰을 검증하고 식별 정보를 반환합니다. 서명/만료/클레임 오류면 None."""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return TokenIdentity.model_validate(payload)
    except (JWTError, ValidationError):
        return None


def hash_password(password: str, rounds: int = 10) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        # 저장된 해시는 72바이트 이하 입력으로만 만들어지므로 일치할 수 없음
        return False
    try:
        return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False

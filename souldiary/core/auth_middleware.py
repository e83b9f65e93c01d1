import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from souldiary.core.exceptions import AuthenticationError, AuthorizationError
from souldiary.core.security import decode_access_token
from souldiary.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

# JWT Bearer 토큰 스킴 - 헤더가 없을 때 직접 401을 만들기 위해 auto_error 끔
security = HTTPBearer(auto_error=False)


def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenIdentity:
    """필수 사용자 인증

    - 토큰 없음 -> 401 (누구인지 알 수 없음)
    - 토큰이 잘못되었거나 만료됨 -> 403
    저장소는 조회하지 않고 토큰에 담긴 식별 정보만 반환한다.
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError()

    settings = request.app.container.config()
    identity = decode_access_token(credentials.credentials, settings)
    if identity is None:
        logger.warning("Rejected bearer token: invalid signature, claims or expiry")
        raise AuthorizationError()
    return identity

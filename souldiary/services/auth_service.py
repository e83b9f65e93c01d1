import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from souldiary.config import Settings
from souldiary.core.exceptions import InternalServerError, InvalidCredentialsError
from souldiary.core.security import create_identity_token, hash_password, verify_password
from souldiary.repositories.user_repository import UserRepository
from souldiary.schemas.auth import LoginRequest, LoginResult, SignupRequest, TokenIdentity
from souldiary.schemas.user import User as UserSchema
from souldiary.services.coin_service import CoinService

logger = logging.getLogger(__name__)


class AuthService:
    """회원 가입과 로그인"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_repo = UserRepository(db)
        self.coin_service = CoinService(db)

    def signup(self, request: SignupRequest) -> UserSchema:
        """사용자 생성 + 가입 코인 지급 (한 트랜잭션)

        이미 사용 중인 아이디는 DB 고유 제약 위반으로 실패하고 내부 오류로 응답한다.
        """
        password_hash = hash_password(request.password, self.settings.BCRYPT_ROUNDS)
        try:
            self.user_repo.create_user(
                login_id=request.user_id,
                name=request.name,
                password_hash=password_hash,
                commit=False,
            )
            if self.settings.SIGNUP_COIN > 0:
                self.coin_service.credit(
                    request.user_id,
                    self.settings.SIGNUP_COIN,
                    reason="Signup bonus",
                    ref_id=f"signup_bonus_{request.user_id}",
                )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Signup failed for {request.user_id}: {e.orig}")
            raise InternalServerError("Signup failed")

        logger.info(f"New user signed up: {request.user_id}")
        return self.user_repo.get_by_login_id(request.user_id)

    def login(self, request: LoginRequest) -> LoginResult:
        user = self.user_repo.get_by_login_id(request.user_id)
        if user is None:
            raise InvalidCredentialsError("User not found")

        password_hash = self.user_repo.get_password_hash(request.user_id)
        if not password_hash or not verify_password(request.password, password_hash):
            raise InvalidCredentialsError("Wrong password")

        identity = TokenIdentity(user_id=user.login_id, name=user.name)
        token = create_identity_token(identity, self.settings)
        logger.info(f"User logged in: {user.login_id}")
        return LoginResult(token=token, user=identity)

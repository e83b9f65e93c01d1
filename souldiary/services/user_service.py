import logging

from sqlalchemy.orm import Session

from souldiary.config import Settings
from souldiary.core.exceptions import InvalidCredentialsError, NotFoundError
from souldiary.core.security import hash_password, verify_password
from souldiary.repositories.user_repository import UserRepository
from souldiary.schemas.user import UserInfo

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_repo = UserRepository(db)

    def get_user_info(self, user_id: str) -> UserInfo:
        user = self.user_repo.get_by_login_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserInfo(user_id=user.login_id, name=user.name, coin=user.coin)

    def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """현재 비밀번호를 다시 확인한 뒤 변경"""
        password_hash = self.user_repo.get_password_hash(user_id)
        if password_hash is None:
            raise NotFoundError("User not found")

        if not verify_password(current_password, password_hash):
            raise InvalidCredentialsError("Current password is incorrect")

        self.user_repo.update_password(
            user_id, hash_password(new_password, self.settings.BCRYPT_ROUNDS)
        )
        logger.info(f"Password changed for user {user_id}")

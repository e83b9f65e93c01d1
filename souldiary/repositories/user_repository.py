from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from souldiary.models.user import User as UserModel
from souldiary.schemas.user import User as UserSchema
from souldiary.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserModel, UserSchema]):
    """사용자 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(UserModel, UserSchema, db)

    def get_by_login_id(self, login_id: str) -> Optional[UserSchema]:
        """로그인 아이디로 사용자 조회 (잔액은 조건부 UPDATE 로 바뀌므로 항상 DB 값으로 갱신)"""
        model_instance = (
            self.db.query(self.model_class)
            .filter(self.model_class.login_id == login_id)
            .populate_existing()
            .first()
        )
        return self._to_schema(model_instance)

    def get_password_hash(self, login_id: str) -> Optional[str]:
        return (
            self.db.query(self.model_class.password_hash)
            .filter(self.model_class.login_id == login_id)
            .scalar()
        )

    def lock_for_update(self, login_id: str) -> Optional[UserModel]:
        """사용자 행에 배타 잠금 (SELECT ... FOR UPDATE)

        트랜잭션이 끝날 때까지 같은 사용자의 다른 잔액 변경은 대기한다.
        """
        return (
            self.db.query(self.model_class)
            .filter(self.model_class.login_id == login_id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def create_user(
        self, login_id: str, name: str, password_hash: str, commit: bool = True
    ) -> Optional[UserSchema]:
        """로컬 사용자 생성 - 잔액은 0에서 시작하고 가입 코인은 원장을 통해 지급"""
        return self.create(
            commit=commit,
            login_id=login_id,
            name=name,
            password_hash=password_hash,
            coin=0,
        )

    def update_password(self, login_id: str, password_hash: str) -> bool:
        result = self.db.execute(
            update(self.model_class)
            .where(self.model_class.login_id == login_id)
            .values(password_hash=password_hash)
        )
        self.db.commit()
        return result.rowcount > 0

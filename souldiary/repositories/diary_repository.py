from typing import List, Optional

from sqlalchemy import delete, desc
from sqlalchemy.orm import Session

from souldiary.models.diary import Diary as DiaryModel
from souldiary.repositories.base import BaseRepository
from souldiary.schemas.diary import Diary as DiarySchema, DiaryCreate


class DiaryRepository(BaseRepository[DiaryModel, DiarySchema]):
    """다이어리 리포지토리 - 모든 조회/삭제는 소유자 조건을 포함한다"""

    def __init__(self, db: Session):
        super().__init__(DiaryModel, DiarySchema, db)

    def create_entry(self, user_id: str, entry: DiaryCreate) -> Optional[DiarySchema]:
        return self.create(
            user_id=user_id,
            date=entry.date,
            title=entry.title,
            one=entry.one,
            content=entry.content,
        )

    def list_by_user(self, user_id: str) -> List[DiarySchema]:
        model_instances = (
            self.db.query(self.model_class)
            .filter(self.model_class.user_id == user_id)
            .order_by(desc(self.model_class.date), desc(self.model_class.id))
            .all()
        )
        return self._to_schemas(model_instances)

    def get_owned(self, diary_id: int, user_id: str) -> Optional[DiarySchema]:
        model_instance = (
            self.db.query(self.model_class)
            .filter(
                self.model_class.id == diary_id,
                self.model_class.user_id == user_id,
            )
            .first()
        )
        return self._to_schema(model_instance)

    def delete_owned(self, diary_id: int, user_id: str) -> bool:
        result = self.db.execute(
            delete(self.model_class).where(
                self.model_class.id == diary_id,
                self.model_class.user_id == user_id,
            )
        )
        self.db.commit()
        return result.rowcount > 0

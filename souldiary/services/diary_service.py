import logging
from typing import List

from sqlalchemy.orm import Session

from souldiary.core.exceptions import NotFoundError
from souldiary.repositories.diary_repository import DiaryRepository
from souldiary.schemas.diary import Diary, DiaryCreate

logger = logging.getLogger(__name__)

# 남의 다이어리와 없는 다이어리를 구분하지 않는다
DIARY_NOT_FOUND = "Diary not found"


class DiaryService:
    def __init__(self, db: Session):
        self.db = db
        self.diary_repo = DiaryRepository(db)

    def add_diary(self, user_id: str, entry: DiaryCreate) -> Diary:
        diary = self.diary_repo.create_entry(user_id, entry)
        logger.info(f"User {user_id} added diary {diary.id} for {entry.date}")
        return diary

    def list_diaries(self, user_id: str) -> List[Diary]:
        return self.diary_repo.list_by_user(user_id)

    def get_diary(self, user_id: str, diary_id: int) -> Diary:
        diary = self.diary_repo.get_owned(diary_id, user_id)
        if diary is None:
            raise NotFoundError(DIARY_NOT_FOUND)
        return diary

    def delete_diary(self, user_id: str, diary_id: int) -> None:
        if not self.diary_repo.delete_owned(diary_id, user_id):
            raise NotFoundError(DIARY_NOT_FOUND)
        logger.info(f"User {user_id} deleted diary {diary_id}")

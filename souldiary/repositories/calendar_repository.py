"""
캘린더 리포지토리 - (user_id, date) 단위 upsert

"조회 후 INSERT/UPDATE" 두 문장 사이의 경쟁을 없애기 위해
DB 고유의 upsert 구문(ON CONFLICT / ON DUPLICATE KEY) 한 문장으로 기록한다.
"""

import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from souldiary.models.calendar import CalendarDay as CalendarDayModel
from souldiary.repositories.base import BaseRepository
from souldiary.schemas.calendar import CalendarDay as CalendarDaySchema

CONFLICT_KEY = ["user_id", "date"]


class CalendarRepository(BaseRepository[CalendarDayModel, CalendarDaySchema]):
    def __init__(self, db: Session):
        super().__init__(CalendarDayModel, CalendarDaySchema, db)

    def _upsert_statement(self, values: Dict[str, Any], update_values: Dict[str, Any]):
        dialect = self.db.get_bind().dialect.name
        table = self.model_class.__table__

        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert

            stmt = insert(table).values(**values)
            return stmt.on_conflict_do_update(index_elements=CONFLICT_KEY, set_=update_values)
        if dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert

            stmt = insert(table).values(**values)
            return stmt.on_conflict_do_update(index_elements=CONFLICT_KEY, set_=update_values)
        if dialect in ("mysql", "mariadb"):
            from sqlalchemy.dialects.mysql import insert

            stmt = insert(table).values(**values)
            return stmt.on_duplicate_key_update(**update_values)

        raise NotImplementedError(f"Upsert is not supported for dialect: {dialect}")

    def upsert_day(
        self,
        user_id: str,
        day: datetime.date,
        fields: Dict[str, Any],
    ) -> Optional[CalendarDaySchema]:
        """(user_id, date) 행이 없으면 fields 로 생성, 있으면 fields 에 있는 컬럼만 갱신"""
        values = {"user_id": user_id, "date": day, **fields}
        update_values = {**fields, "updated_at": func.now()}
        try:
            self.db.execute(self._upsert_statement(values, update_values))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return self.get_day(user_id, day)

    def get_day(self, user_id: str, day: datetime.date) -> Optional[CalendarDaySchema]:
        model_instance = (
            self.db.query(self.model_class)
            .filter(self.model_class.user_id == user_id, self.model_class.date == day)
            .populate_existing()
            .first()
        )
        return self._to_schema(model_instance)

    def list_days(
        self,
        user_id: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> List[CalendarDaySchema]:
        query = self.db.query(self.model_class).filter(self.model_class.user_id == user_id)
        if start is not None:
            query = query.filter(self.model_class.date >= start)
        if end is not None:
            query = query.filter(self.model_class.date < end)
        return self._to_schemas(query.order_by(self.model_class.date).all())

    def count_days(self, user_id: str, day: datetime.date) -> int:
        return (
            self.db.query(func.count(self.model_class.id))
            .filter(self.model_class.user_id == user_id, self.model_class.date == day)
            .scalar()
        )

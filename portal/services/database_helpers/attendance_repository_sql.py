# /portal/services/database_helpers/attendance_repository_sql.py

import datetime as dt
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from ...core.errors import StorageError
from ...db.models.attendance_models import Attendance
from .base_repository_sql import BaseRepositorySQL

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class AttendanceRepositorySQL(BaseRepositorySQL):

    def get_record(self, student_id: str, day: dt.date) -> Optional[Attendance]:
        stmt = select(Attendance).where(Attendance.student_id == student_id, Attendance.date == day)
        return self._fetch_first(stmt, "Looking up attendance")

    def get_records_for_date(self, day: dt.date) -> List[Attendance]:
        stmt = (
            select(Attendance)
            .options(selectinload(Attendance.student))
            .where(Attendance.date == day)
            .order_by(Attendance.student_id.asc())
        )
        return self._fetch_all(stmt, f"Loading attendance for {day}")

    def get_records_for_student(self, student_id: str) -> List[Attendance]:
        stmt = (
            select(Attendance)
            .where(Attendance.student_id == student_id)
            .order_by(Attendance.date.desc())
        )
        return self._fetch_all(stmt, "Loading a student's attendance")

    def upsert(self, record: Dict) -> Attendance:
        """
        Inserts the (student_id, date) row or, if it already exists, updates
        its status (and notes, when given) in the same statement. The first
        `recorded_by` and `id` are kept.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise StorageError(f"Attendance upsert is not supported on '{dialect}'.")

        stmt = insert(Attendance).values(**record)
        changes = {"status": stmt.excluded.status}
        if record.get("notes") is not None:
            changes["notes"] = stmt.excluded.notes
        stmt = stmt.on_conflict_do_update(index_elements=["student_id", "date"], set_=changes)

        try:
            self.db.execute(stmt)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Recording attendance failed: {e}") from e
        self._commit("Recording attendance")

        saved = self.get_record(record["student_id"], record["date"])
        # The statement bypassed the identity map; make sure we hand back fresh values.
        self.db.refresh(saved)
        return saved

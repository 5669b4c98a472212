# /portal/services/database_helpers/record_store_sql.py

"""
The generic query/mutate surface over every portal collection.

Views address records by collection name ('assignments', 'profiles', ...)
and describe what they want with plain data: equality filters, OR-of-equality
filters, an ordering column and relationship paths to expand. This keeps the
service layer independent of the ORM classes for simple reads and writes,
while operations that need more than one row written at once live in the
specialised repositories next to this module.
"""

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import inspect, select
from sqlalchemy.orm import selectinload

from ...db.models.profile_models import Profile
from ...db.models.content_models import Assignment, Quiz, Project
from ...db.models.submission_models import Submission, QuizSubmission, ProjectSubmission, Grade
from ...db.models.attendance_models import Attendance
from .base_repository_sql import BaseRepositorySQL

COLLECTIONS = {
    "profiles": Profile,
    "assignments": Assignment,
    "quizzes": Quiz,
    "projects": Project,
    "submissions": Submission,
    "quiz_submissions": QuizSubmission,
    "project_submissions": ProjectSubmission,
    "grades": Grade,
    "attendance": Attendance,
}


class RecordStoreSQL(BaseRepositorySQL):

    # --- Introspection helpers ---

    @staticmethod
    def _model_for(collection: str):
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection '{collection}'.")

    @staticmethod
    def _column_for(model, field: str):
        if field not in inspect(model).columns:
            raise ValueError(f"'{model.__tablename__}' has no field '{field}'.")
        return getattr(model, field)

    @staticmethod
    def _loader_for(model, path: str):
        """Turns 'submissions.grades' into a chained selectinload option."""
        option = None
        current = model
        for part in path.split("."):
            relationships = inspect(current).relationships
            if part not in relationships:
                raise ValueError(f"'{current.__tablename__}' has no relationship '{part}'.")
            attribute = getattr(current, part)
            option = selectinload(attribute) if option is None else option.selectinload(attribute)
            current = relationships[part].mapper.class_
        return option

    # --- Read ---

    def query(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        any_of: Optional[Dict[str, Iterable[Any]]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        expand: Optional[List[str]] = None,
    ) -> List[Any]:
        """
        Fetches records from one collection.

        `filters` are ANDed equality predicates. Each entry of `any_of` is an
        OR of equality predicates on one field (e.g. target_phase is 'both' OR
        'phase1'); an empty value list matches nothing. Ties in `order_by`
        are broken by primary key so the result order is deterministic.
        """
        model = self._model_for(collection)
        stmt = select(model)
        for field, value in (filters or {}).items():
            stmt = stmt.where(self._column_for(model, field) == value)
        for field, values in (any_of or {}).items():
            stmt = stmt.where(self._column_for(model, field).in_(list(values)))
        for path in expand or []:
            stmt = stmt.options(self._loader_for(model, path))
        if order_by:
            column = self._column_for(model, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        stmt = stmt.order_by(model.id.asc())
        return self._fetch_all(stmt, f"Querying {collection}")

    def get(self, collection: str, record_id: str, expand: Optional[List[str]] = None) -> Optional[Any]:
        rows = self.query(collection, filters={"id": record_id}, expand=expand)
        return rows[0] if rows else None

    # --- Write ---

    def insert(self, collection: str, record: Dict[str, Any]) -> Any:
        model = self._model_for(collection)
        new_record = model(**record)
        self.db.add(new_record)
        self._commit(f"Creating a record in {collection}")
        self.db.refresh(new_record)
        return new_record

    def update(self, collection: str, record_id: str, data: Dict[str, Any]) -> Optional[Any]:
        """Applies a partial update. Returns None if the record does not exist."""
        model = self._model_for(collection)
        db_record = self.get(collection, record_id)
        if db_record is None:
            return None
        for field, value in data.items():
            self._column_for(model, field)
            setattr(db_record, field, value)
        self._commit(f"Updating {collection}/{record_id}")
        self.db.refresh(db_record)
        return db_record

    def delete(self, collection: str, record_id: str) -> bool:
        """
        Deletes one record. Dependent rows follow the cascade rules declared
        on the models (e.g. an assignment takes its submissions and grades).
        """
        db_record = self.get(collection, record_id)
        if db_record is None:
            return False
        self.db.delete(db_record)
        self._commit(f"Deleting {collection}/{record_id}")
        return True

    def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        return len(self.query(collection, filters=filters))

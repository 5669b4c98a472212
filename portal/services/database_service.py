# /portal/services/database_service.py

from typing import Any, Dict, Generator, Iterable, List, Optional
import datetime as dt

from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from ..db.database import get_db

# --- Repository Imports ---
from .database_helpers.record_store_sql import RecordStoreSQL
from .database_helpers.profile_repository_sql import ProfileRepositorySQL
from .database_helpers.submission_repository_sql import SubmissionRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Single entry point to the store for the service layer. Generic reads
        and writes go to the record store; operations that must write more
        than one row atomically go to the specialised repositories.
        """
        self.db = db_session
        self.record_store = RecordStoreSQL(db_session)
        self.profile_repo = ProfileRepositorySQL(db_session)
        self.submission_repo = SubmissionRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)

    # --- GENERIC COLLECTION METHODS (DELEGATED) ---
    def query(self, collection: str, filters: Optional[Dict[str, Any]] = None, any_of: Optional[Dict[str, Iterable[Any]]] = None,
              order_by: Optional[str] = None, descending: bool = False, expand: Optional[List[str]] = None) -> List[Any]:
        return self.record_store.query(collection, filters=filters, any_of=any_of, order_by=order_by, descending=descending, expand=expand)
    def get(self, collection: str, record_id: str, expand: Optional[List[str]] = None) -> Optional[Any]: return self.record_store.get(collection, record_id, expand=expand)
    def insert(self, collection: str, record: Dict[str, Any]) -> Any: return self.record_store.insert(collection, record)
    def update(self, collection: str, record_id: str, data: Dict[str, Any]) -> Optional[Any]: return self.record_store.update(collection, record_id, data)
    def delete(self, collection: str, record_id: str) -> bool: return self.record_store.delete(collection, record_id)
    def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int: return self.record_store.count(collection, filters=filters)

    # --- IDENTITY & PROFILE METHODS (DELEGATED) ---
    def get_auth_user_by_email(self, email: str): return self.profile_repo.get_auth_user_by_email(email)
    def get_profile_by_id(self, profile_id: str): return self.profile_repo.get_profile_by_id(profile_id)
    def sign_up(self, auth_record: Dict, profile_record: Dict): return self.profile_repo.add_user_with_profile(auth_record, profile_record)
    def delete_user(self, user_id: str) -> bool: return self.profile_repo.delete_user(user_id)

    # --- SUBMISSION & GRADE METHODS (DELEGATED) ---
    def get_submission(self, kind: str, submission_id: str): return self.submission_repo.get_submission(kind, submission_id)
    def get_submissions(self, kind: str, status: Optional[str] = None, student_id: Optional[str] = None,
                        item_ids: Optional[Iterable[str]] = None, newest_first: bool = True) -> List:
        return self.submission_repo.get_submissions(kind, status=status, student_id=student_id, item_ids=item_ids, newest_first=newest_first)
    def add_submission(self, kind: str, record: Dict): return self.submission_repo.add_submission(kind, record)
    def update_submission(self, submission, data: Dict): return self.submission_repo.update_submission(submission, data)
    def grade_submission(self, submission, grade_record: Dict): return self.submission_repo.add_grade_and_mark_graded(submission, grade_record)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def upsert_attendance(self, record: Dict): return self.attendance_repo.upsert(record)
    def get_attendance_for_date(self, day: dt.date) -> List: return self.attendance_repo.get_records_for_date(day)
    def get_attendance_for_student(self, student_id: str) -> List: return self.attendance_repo.get_records_for_student(student_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)

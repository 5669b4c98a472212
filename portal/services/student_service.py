# /portal/services/student_service.py

"""
Admin-side management of the student roster.
"""

import logging
from typing import List, Optional

from ..core.errors import RecordNotFoundError
from ..models import profile_model
from . import auth_service
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def list_students(db: DatabaseService, phase: Optional[str] = None) -> List:
    filters = {"role": profile_model.Role.STUDENT.value}
    if phase:
        filters["phase"] = phase
    return db.query("profiles", filters=filters, order_by="full_name")


def get_student(student_id: str, db: DatabaseService):
    profile = db.get_profile_by_id(student_id)
    if profile is None or profile.role != profile_model.Role.STUDENT.value:
        raise RecordNotFoundError(f"Student with ID {student_id} not found")
    return profile


def provision_student(student_in: profile_model.StudentCreate, db: DatabaseService):
    return auth_service.sign_up(
        db,
        email=student_in.email,
        password=student_in.password,
        full_name=student_in.full_name,
        role=profile_model.Role.STUDENT.value,
        phase=student_in.phase,
    )


def update_phase(student_id: str, phase: str, db: DatabaseService):
    get_student(student_id, db)
    updated = db.update("profiles", student_id, {"phase": phase})
    logger.info("Moved student %s to %s", student_id, phase)
    return updated


def delete_student(student_id: str, db: DatabaseService) -> None:
    """Deletes the student's account together with all their work and attendance."""
    get_student(student_id, db)
    db.delete_user(student_id)
    logger.info("Deleted student %s", student_id)

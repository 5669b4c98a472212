# /portal/services/attendance_service.py

import logging
import datetime as dt
from typing import List

from ..models import attendance_model, profile_model
from . import student_service
from .attendance_helpers import aggregates
from .coursework_helpers import kinds
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def mark_attendance(mark: attendance_model.AttendanceMark, admin_id: str, db: DatabaseService):
    """
    Sets the student's status for the day. Marking the same (student, date)
    again changes the existing record instead of adding a second one.
    """
    student_service.get_student(mark.student_id, db)
    record = {
        "id": kinds.new_id("att"),
        "student_id": mark.student_id,
        "date": mark.date,
        "status": mark.status,
        "notes": mark.notes,
        "recorded_by": admin_id,
    }
    saved = db.upsert_attendance(record)
    logger.info("Admin %s marked %s %s on %s", admin_id, mark.student_id, mark.status, mark.date)
    return saved


def roster_for_date(day: dt.date, db: DatabaseService) -> List[attendance_model.RosterEntry]:
    """Every student, alphabetically, with their record for `day` if one exists."""
    students = student_service.list_students(db)
    by_student = {}
    for record in db.get_attendance_for_date(day):
        by_student.setdefault(record.student_id, record)

    roster = []
    for student in students:
        record = by_student.get(student.id)
        roster.append(attendance_model.RosterEntry(
            student=profile_model.Profile.model_validate(student),
            attendance=attendance_model.Attendance.model_validate(record) if record is not None else None,
        ))
    return roster


def summary_for_date(day: dt.date, db: DatabaseService) -> attendance_model.AttendanceSummary:
    return attendance_model.AttendanceSummary(**aggregates.summarize_attendance(db.get_attendance_for_date(day)))


def student_attendance(student_id: str, db: DatabaseService) -> attendance_model.StudentAttendance:
    records = db.get_attendance_for_student(student_id)
    return attendance_model.StudentAttendance(
        records=[attendance_model.Attendance.model_validate(r) for r in records],
        summary=attendance_model.AttendanceSummary(**aggregates.summarize_attendance(records)),
    )

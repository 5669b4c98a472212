# /portal/services/dashboard_service.py

import logging
import datetime as dt
from typing import Optional

import pandas as pd

from ..models.content_model import ContentKind
from ..models.dashboard_model import AdminDashboardSummary
from ..models.submission_model import SubmissionStatus
from . import attendance_service, student_service
from .coursework_helpers import kinds, scoring
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

_AWAITING_GRADE = {
    ContentKind.ASSIGNMENT: SubmissionStatus.PENDING.value,
    ContentKind.QUIZ: SubmissionStatus.SUBMITTED.value,
    ContentKind.PROJECT: SubmissionStatus.PENDING.value,
}


def get_admin_summary(db: DatabaseService, today: Optional[dt.date] = None) -> AdminDashboardSummary:
    """
    Aggregates the admin overview cards: roster size per phase, published
    items, the grading backlog, the overall grade average and today's
    attendance.
    """
    today = today or dt.date.today()
    try:
        students = student_service.list_students(db)
        phases = pd.Series([s.phase or "unassigned" for s in students], dtype="object")
        students_by_phase = {str(k): int(v) for k, v in phases.value_counts().sort_index().items()}

        item_counts = {kind: db.count(kinds.spec_for(kind).collection) for kind in ContentKind}
        pending = sum(
            len(db.get_submissions(kind.value, status=status))
            for kind, status in _AWAITING_GRADE.items()
        )

        return AdminDashboardSummary(
            studentCount=len(students),
            studentsByPhase=students_by_phase,
            assignmentCount=item_counts[ContentKind.ASSIGNMENT],
            quizCount=item_counts[ContentKind.QUIZ],
            projectCount=item_counts[ContentKind.PROJECT],
            pendingSubmissionCount=pending,
            averageGradePercentage=scoring.average_percentage(db.query("grades")),
            todayAttendance=attendance_service.summary_for_date(today, db),
        )
    except Exception:
        logger.error("Failed to build the admin dashboard summary.", exc_info=True)
        raise

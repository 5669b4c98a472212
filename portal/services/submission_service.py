# /portal/services/submission_service.py

"""
Business logic for student work: submitting, quiz attempts, grading and the
two read views built on top of them (the admin grading queue and the
student's own coursework list).

Every transition goes through `state_machine.ensure_transition` before the
store is touched; the store then backs the same rules with its unique
constraints.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import DuplicateRecordError, RecordNotFoundError
from ..models import content_model, submission_model
from ..models.content_model import ContentKind
from ..models.submission_model import SubmissionStatus
from . import content_service
from .coursework_helpers import kinds, scoring, state_machine, visibility
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc)


def _own_submission(kind: ContentKind, item_id: str, student_id: str, db: DatabaseService):
    submissions = db.get_submissions(kind.value, student_id=student_id, item_ids=[item_id], newest_first=False)
    return visibility.submission_for(item_id, submissions, student_id)


# --- Student actions ---

def submit_work(kind: ContentKind, item_id: str, student, payload: submission_model.SubmissionCreate, db: DatabaseService):
    """
    Records the student's links for an item. Assignments and projects start
    as 'pending'; quizzes go straight to 'submitted' (or move there from
    'in_progress'). A second submission for the same item is refused.
    """
    content_service.get_visible_item(kind, item_id, student, db)
    if kind == ContentKind.QUIZ:
        return _submit_quiz(item_id, student, payload, db)

    spec = kinds.spec_for(kind)
    if _own_submission(kind, item_id, student.id, db) is not None:
        raise DuplicateRecordError(f"You have already submitted this {kind.value}.")
    target = state_machine.SUBMITTED_STATUS[kind]
    state_machine.ensure_transition(kind, None, target)

    record = {
        "id": kinds.new_id(spec.submission_id_prefix),
        spec.item_field: item_id,
        "student_id": student.id,
        "github_url": payload.github_url,
        "video_url": payload.video_url,
        "submitted_at": _now(),
        "status": target,
    }
    submission = db.add_submission(kind.value, record)
    logger.info("Student %s submitted %s %s", student.id, kind.value, item_id)
    return submission


def start_quiz(quiz_id: str, student, db: DatabaseService):
    """Opens an attempt: creates the quiz submission in 'in_progress'."""
    content_service.get_visible_item(ContentKind.QUIZ, quiz_id, student, db)
    if _own_submission(ContentKind.QUIZ, quiz_id, student.id, db) is not None:
        raise DuplicateRecordError("You have already started this quiz.")
    state_machine.ensure_transition(ContentKind.QUIZ, None, SubmissionStatus.IN_PROGRESS)

    spec = kinds.spec_for(ContentKind.QUIZ)
    record = {
        "id": kinds.new_id(spec.submission_id_prefix),
        "quiz_id": quiz_id,
        "student_id": student.id,
        "started_at": _now(),
        "status": SubmissionStatus.IN_PROGRESS.value,
    }
    attempt = db.add_submission(ContentKind.QUIZ.value, record)
    logger.info("Student %s started quiz %s", student.id, quiz_id)
    return attempt


def _submit_quiz(quiz_id: str, student, payload: submission_model.SubmissionCreate, db: DatabaseService):
    existing = _own_submission(ContentKind.QUIZ, quiz_id, student.id, db)
    now = _now()

    if existing is None:
        state_machine.ensure_transition(ContentKind.QUIZ, None, SubmissionStatus.SUBMITTED)
        spec = kinds.spec_for(ContentKind.QUIZ)
        record = {
            "id": kinds.new_id(spec.submission_id_prefix),
            "quiz_id": quiz_id,
            "student_id": student.id,
            "github_url": payload.github_url,
            "video_url": payload.video_url,
            "started_at": now,
            "submitted_at": now,
            "status": SubmissionStatus.SUBMITTED.value,
        }
        submission = db.add_submission(ContentKind.QUIZ.value, record)
    else:
        state_machine.ensure_transition(ContentKind.QUIZ, existing.status, SubmissionStatus.SUBMITTED)
        submission = db.update_submission(existing, {
            "github_url": payload.github_url,
            "video_url": payload.video_url,
            "submitted_at": now,
            "status": SubmissionStatus.SUBMITTED.value,
        })
    logger.info("Student %s submitted quiz %s", student.id, quiz_id)
    return submission


# --- Admin actions ---

def grade_submission(kind: ContentKind, submission_id: str, grade_in: submission_model.GradeCreate, admin_id: str, db: DatabaseService):
    """
    Creates the Grade for a submission and marks the submission 'graded'.
    Both writes commit together; a failure leaves the submission untouched.
    """
    submission = db.get_submission(kind.value, submission_id)
    if submission is None:
        raise RecordNotFoundError(f"{kind.value.capitalize()} submission with ID {submission_id} not found")
    state_machine.ensure_transition(kind, submission.status, SubmissionStatus.GRADED)

    spec = kinds.spec_for(kind)
    grade_record = {
        "id": kinds.new_id("grd"),
        "student_id": submission.student_id,
        spec.item_field: submission.item_id,
        spec.grade_submission_field: submission.id,
        "grade": grade_in.grade,
        "max_grade": grade_in.max_grade,
        "feedback": grade_in.feedback or None,
        "graded_by": admin_id,
        "graded_at": _now(),
    }
    grade = db.grade_submission(submission, grade_record)
    logger.info("Admin %s graded %s submission %s: %s/%s", admin_id, kind.value, submission_id, grade.grade, grade.max_grade)
    return grade


# --- Read views ---

def _grade_view(grade) -> Optional[submission_model.Grade]:
    return submission_model.Grade.model_validate(grade) if grade is not None else None


def _percentage(grade) -> Optional[float]:
    return scoring.grade_percentage(grade.grade, grade.max_grade) if grade is not None else None


def list_submissions(kind: ContentKind, db: DatabaseService, status: Optional[str] = None) -> List[submission_model.SubmissionDetails]:
    """Every submission of one kind, newest first, as the grading queue shows it."""
    details = []
    for submission in db.get_submissions(kind.value, status=status):
        grade = visibility.first_grade(submission.grades)
        details.append(submission_model.SubmissionDetails(
            **submission_model.SubmissionRead.model_validate(submission).model_dump(),
            item_title=submission.item.title,
            student_name=submission.student.full_name,
            student_email=submission.student.email,
            grade=_grade_view(grade),
            percentage=_percentage(grade),
        ))
    return details


def student_items(kind: ContentKind, student, db: DatabaseService) -> List[submission_model.StudentItem]:
    """
    The items visible to the student, each joined with the student's own
    submission and its grade. Only the student's rows are fetched.
    """
    items = content_service.list_visible_items(kind, student.phase, db)
    submissions = db.get_submissions(
        kind.value,
        student_id=student.id,
        item_ids=[item.id for item in items],
        newest_first=False,
    )
    item_model = content_model.READ_MODELS[kind]
    view_model = submission_model.STUDENT_ITEM_MODELS[kind]

    views = []
    for item, submission in visibility.attach_submission(items, submissions, student.id):
        grade = visibility.first_grade(submission.grades) if submission is not None else None
        views.append(view_model(
            kind=kind,
            item=item_model.model_validate(item),
            status=state_machine.display_status(submission),
            submission=submission_model.SubmissionRead.model_validate(submission) if submission is not None else None,
            grade=_grade_view(grade),
            percentage=_percentage(grade),
        ))
    return views

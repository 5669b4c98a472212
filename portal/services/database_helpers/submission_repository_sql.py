# /portal/services/database_helpers/submission_repository_sql.py

"""
Queries for the three submission tables and the grades attached to them.

The kind of content ('assignment', 'quiz', 'project') selects the table.
Reads always eager-load the student, the item and the grades, because every
caller renders at least one of them.
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ...core.errors import DuplicateRecordError
from ...db.models.submission_models import Submission, QuizSubmission, ProjectSubmission, Grade
from .base_repository_sql import BaseRepositorySQL

SUBMISSION_MODELS = {
    "assignment": Submission,
    "quiz": QuizSubmission,
    "project": ProjectSubmission,
}

# Column that defines "first returned" for each table.
_ORDER_COLUMNS = {
    "assignment": Submission.submitted_at,
    "quiz": QuizSubmission.started_at,
    "project": ProjectSubmission.submitted_at,
}

_ITEM_COLUMNS = {
    "assignment": Submission.assignment_id,
    "quiz": QuizSubmission.quiz_id,
    "project": ProjectSubmission.project_id,
}

_ITEM_RELATIONSHIPS = {
    "assignment": Submission.assignment,
    "quiz": QuizSubmission.quiz,
    "project": ProjectSubmission.project,
}


class SubmissionRepositorySQL(BaseRepositorySQL):

    def _select(self, kind: str):
        model = SUBMISSION_MODELS[kind]
        return select(model).options(
            selectinload(model.student),
            selectinload(_ITEM_RELATIONSHIPS[kind]),
            selectinload(model.grades),
        )

    # --- Reads ---

    def get_submission(self, kind: str, submission_id: str):
        model = SUBMISSION_MODELS[kind]
        stmt = self._select(kind).where(model.id == submission_id)
        return self._fetch_first(stmt, f"Looking up {kind} submission {submission_id}")

    def get_submissions(
        self,
        kind: str,
        status: Optional[str] = None,
        student_id: Optional[str] = None,
        item_ids: Optional[Iterable[str]] = None,
        newest_first: bool = True,
    ) -> List:
        """
        Lists submissions of one kind. `student_id` and `item_ids` narrow the
        query in the store itself, so a student's view never loads rows that
        belong to somebody else.
        """
        model = SUBMISSION_MODELS[kind]
        stmt = self._select(kind)
        if status is not None:
            stmt = stmt.where(model.status == status)
        if student_id is not None:
            stmt = stmt.where(model.student_id == student_id)
        if item_ids is not None:
            stmt = stmt.where(_ITEM_COLUMNS[kind].in_(list(item_ids)))
        order_column = _ORDER_COLUMNS[kind]
        stmt = stmt.order_by(order_column.desc() if newest_first else order_column.asc(), model.id.asc())
        return self._fetch_all(stmt, f"Listing {kind} submissions")

    # --- Writes ---

    def add_submission(self, kind: str, record: Dict):
        """
        Inserts a submission. A second row for the same (item, student) is
        refused by the table's unique constraint.
        """
        new_submission = SUBMISSION_MODELS[kind](**record)
        self.db.add(new_submission)
        self._commit(f"Submitting the {kind}", conflict_error=DuplicateRecordError)
        self.db.refresh(new_submission)
        return new_submission

    def update_submission(self, submission, data: Dict):
        for key, value in data.items():
            setattr(submission, key, value)
        self._commit(f"Updating {submission.kind} submission {submission.id}")
        self.db.refresh(submission)
        return submission

    def add_grade_and_mark_graded(self, submission, grade_record: Dict) -> Grade:
        """
        Writes the grade and flips the submission to 'graded' in a single
        commit. If either write fails, neither is kept.
        """
        new_grade = Grade(**grade_record)
        self.db.add(new_grade)
        submission.status = "graded"
        self._commit(f"Grading {submission.kind} submission {submission.id}", conflict_error=DuplicateRecordError)
        self.db.refresh(new_grade)
        self.db.refresh(submission)
        return new_grade

# /portal/models/submission_model.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .content_model import ContentKind, Assignment, Quiz, Project


class SubmissionStatus(str, Enum):
    # Never stored; reported for items the student has not submitted yet.
    UNSUBMITTED = "unsubmitted"
    IN_PROGRESS = "in_progress"
    PENDING = "pending"
    SUBMITTED = "submitted"
    GRADED = "graded"


class StoredSubmissionStatus(str, Enum):
    """The statuses a submission row can actually hold."""
    IN_PROGRESS = "in_progress"
    PENDING = "pending"
    SUBMITTED = "submitted"
    GRADED = "graded"


class SubmissionCreate(BaseModel):
    """Both links are mandatory for every kind of submission."""
    github_url: str = Field(..., min_length=1, examples=["https://github.com/u/r"])
    video_url: str = Field(..., min_length=1, examples=["https://youtube.com/watch?v=x"])

    @field_validator("github_url", "video_url")
    @classmethod
    def link_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Link must not be blank.")
        return v.strip()


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    kind: ContentKind
    item_id: str
    student_id: str
    github_url: Optional[str] = None
    video_url: Optional[str] = None
    started_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None
    status: SubmissionStatus


class GradeCreate(BaseModel):
    # Scores above max_grade are accepted as-is.
    grade: float
    max_grade: float = Field(default=100)
    feedback: Optional[str] = None


class Grade(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    assignment_id: Optional[str] = None
    quiz_id: Optional[str] = None
    project_id: Optional[str] = None
    submission_id: Optional[str] = None
    quiz_submission_id: Optional[str] = None
    project_submission_id: Optional[str] = None
    grade: float
    max_grade: float
    feedback: Optional[str] = None
    graded_by: Optional[str] = None
    graded_at: datetime


class SubmissionDetails(SubmissionRead):
    """A submission as the admin grading queue shows it."""
    item_title: str
    student_name: str
    student_email: str
    grade: Optional[Grade] = None
    percentage: Optional[float] = None


class StudentItem(BaseModel):
    """One visible content item joined with the caller's own work on it."""
    kind: ContentKind
    status: SubmissionStatus
    submission: Optional[SubmissionRead] = None
    grade: Optional[Grade] = None
    percentage: Optional[float] = None


class StudentAssignmentItem(StudentItem):
    item: Assignment


class StudentQuizItem(StudentItem):
    item: Quiz


class StudentProjectItem(StudentItem):
    item: Project


STUDENT_ITEM_MODELS = {
    ContentKind.ASSIGNMENT: StudentAssignmentItem,
    ContentKind.QUIZ: StudentQuizItem,
    ContentKind.PROJECT: StudentProjectItem,
}

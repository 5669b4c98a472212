# /portal/db/models/submission_models.py

"""
SQLAlchemy models for student work and its evaluation.

There is one submission table per kind of content. Each table allows at most
one row per (item, student), and each submission can carry at most one
`Grade`. Both rules live in the schema as unique constraints so that a double
click or two admins racing each other is rejected by the store itself.

Every submission model exposes the same read-only trio `kind`, `item_id` and
`item` so the service layer can treat the three tables uniformly.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Submission(Base):
    """An assignment submission: pending until graded."""
    __tablename__ = "submissions"
    __table_args__ = (UniqueConstraint("assignment_id", "student_id", name="uq_submissions_assignment_student"),)

    id = Column(String, primary_key=True, index=True)
    assignment_id = Column(String, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    github_url = Column(String, nullable=False)
    video_url = Column(String, nullable=False)
    submitted_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    status = Column(String, nullable=False, default="pending")

    assignment = relationship("Assignment", back_populates="submissions")
    student = relationship("Profile", back_populates="submissions")
    grades = relationship(
        "Grade",
        back_populates="submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Grade.graded_at",
    )

    kind = "assignment"

    @property
    def item_id(self):
        return self.assignment_id

    @property
    def item(self):
        return self.assignment


class QuizSubmission(Base):
    """A quiz attempt: in_progress -> submitted -> graded."""
    __tablename__ = "quiz_submissions"
    __table_args__ = (UniqueConstraint("quiz_id", "student_id", name="uq_quiz_submissions_quiz_student"),)

    id = Column(String, primary_key=True, index=True)
    quiz_id = Column(String, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    github_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    started_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(String, nullable=False, default="in_progress")

    quiz = relationship("Quiz", back_populates="submissions")
    student = relationship("Profile", back_populates="quiz_submissions")
    grades = relationship(
        "Grade",
        back_populates="quiz_submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Grade.graded_at",
    )

    kind = "quiz"

    @property
    def item_id(self):
        return self.quiz_id

    @property
    def item(self):
        return self.quiz


class ProjectSubmission(Base):
    """A project submission: pending until graded."""
    __tablename__ = "project_submissions"
    __table_args__ = (UniqueConstraint("project_id", "student_id", name="uq_project_submissions_project_student"),)

    id = Column(String, primary_key=True, index=True)
    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    github_url = Column(String, nullable=False)
    video_url = Column(String, nullable=False)
    submitted_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    status = Column(String, nullable=False, default="pending")

    project = relationship("Project", back_populates="submissions")
    student = relationship("Profile", back_populates="project_submissions")
    grades = relationship(
        "Grade",
        back_populates="project_submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Grade.graded_at",
    )

    kind = "project"

    @property
    def item_id(self):
        return self.project_id

    @property
    def item(self):
        return self.project


class Grade(Base):
    """
    A score and feedback for exactly one submission. Exactly one of the three
    submission foreign keys is set; the matching item id and the student id
    are copied onto the row so grades can be listed without joins.
    """
    __tablename__ = "grades"

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    assignment_id = Column(String, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=True)
    quiz_id = Column(String, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=True)
    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True)

    submission_id = Column(String, ForeignKey("submissions.id", ondelete="CASCADE"), unique=True, nullable=True)
    quiz_submission_id = Column(String, ForeignKey("quiz_submissions.id", ondelete="CASCADE"), unique=True, nullable=True)
    project_submission_id = Column(String, ForeignKey("project_submissions.id", ondelete="CASCADE"), unique=True, nullable=True)

    grade = Column(Float, nullable=False)
    max_grade = Column(Float, nullable=False, default=100)
    feedback = Column(String, nullable=True)
    graded_by = Column(String, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    graded_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    student = relationship("Profile", back_populates="grades", foreign_keys=[student_id])
    submission = relationship("Submission", back_populates="grades")
    quiz_submission = relationship("QuizSubmission", back_populates="grades")
    project_submission = relationship("ProjectSubmission", back_populates="grades")

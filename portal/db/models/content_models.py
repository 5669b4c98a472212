# /portal/db/models/content_models.py

"""
SQLAlchemy models for the three kinds of phase-targeted content an admin
publishes: assignments, quizzes and projects.

Content never changes state after creation. Deleting an item cascades to its
submissions and, through them, to their grades.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    instructions = Column(String, nullable=True)
    # 'phase1', 'phase2' or 'both'.
    target_phase = Column(String, index=True, nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    document_url = Column(String, nullable=True)
    created_by = Column(String, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    submissions = relationship("Submission", back_populates="assignment", cascade="all, delete-orphan", passive_deletes=True)


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    instructions = Column(String, nullable=True)
    target_phase = Column(String, index=True, nullable=False)
    time_limit_minutes = Column(Integer, nullable=False, default=30)
    start_time = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(String, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    submissions = relationship("QuizSubmission", back_populates="quiz", cascade="all, delete-orphan", passive_deletes=True)


class Project(Base):
    __tablename__ = "projects"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    guidelines = Column(String, nullable=True)
    target_phase = Column(String, index=True, nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    is_collaborative = Column(Boolean, nullable=False, default=False)
    created_by = Column(String, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    submissions = relationship("ProjectSubmission", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)

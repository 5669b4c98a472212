# /portal/db/models/profile_models.py

"""
SQLAlchemy models for identities and people.

`AuthUser` is the credential record owned by the auth collaborator. `Profile`
shares its primary key and carries everything the portal itself knows about a
person: name, role and (for students) phase. Deleting an `AuthUser` removes
the profile and, through it, every submission, grade and attendance record
of that student.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow():
    return datetime.now(timezone.utc)


class AuthUser(Base):
    __tablename__ = "auth_users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    profile = relationship("Profile", back_populates="auth_user", uselist=False, cascade="all, delete-orphan")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String, ForeignKey("auth_users.id", ondelete="CASCADE"), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    role = Column(String, index=True, nullable=False)
    # Required for students, always NULL for admins.
    phase = Column(String, index=True, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    auth_user = relationship("AuthUser", back_populates="profile")

    submissions = relationship("Submission", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    quiz_submissions = relationship("QuizSubmission", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    project_submissions = relationship("ProjectSubmission", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    grades = relationship(
        "Grade",
        back_populates="student",
        foreign_keys="Grade.student_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    attendance = relationship(
        "Attendance",
        back_populates="student",
        foreign_keys="Attendance.student_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

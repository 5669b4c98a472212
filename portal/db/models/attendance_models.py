# /portal/db/models/attendance_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Attendance(Base):
    """
    One student's status on one day. The (student_id, date) pair is the
    natural key; marking the same pair again updates the row in place.
    """
    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),)

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    # 'present', 'absent' or 'late'.
    status = Column(String, nullable=False)
    notes = Column(String, nullable=True)
    recorded_by = Column(String, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    student = relationship("Profile", back_populates="attendance", foreign_keys=[student_id])

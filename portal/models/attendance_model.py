# /portal/models/attendance_model.py

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from .profile_model import Profile


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class AttendanceMark(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    student_id: str
    date: dt.date
    status: AttendanceStatus
    notes: Optional[str] = None


class Attendance(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    date: dt.date
    status: AttendanceStatus
    notes: Optional[str] = None
    recorded_by: Optional[str] = None
    created_at: dt.datetime


class AttendanceSummary(BaseModel):
    present: int = 0
    late: int = 0
    absent: int = 0
    total: int = 0
    rate: float = Field(default=0.0, description="(present + late) / total * 100; 0 when there are no records.")


class RosterEntry(BaseModel):
    student: Profile
    attendance: Optional[Attendance] = None


class StudentAttendance(BaseModel):
    records: List[Attendance]
    summary: AttendanceSummary

# /portal/models/dashboard_model.py

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .attendance_model import AttendanceSummary


class AdminDashboardSummary(BaseModel):
    """
    Defines the data contract for the admin dashboard's overview cards.
    """
    studentCount: int = Field(..., description="Total number of student profiles.", examples=[42])
    studentsByPhase: Dict[str, int] = Field(default_factory=dict, description="Student count per phase.")
    assignmentCount: int = Field(..., examples=[6])
    quizCount: int = Field(..., examples=[3])
    projectCount: int = Field(..., examples=[2])
    pendingSubmissionCount: int = Field(..., description="Submissions waiting for a grade, across all kinds.")
    averageGradePercentage: Optional[float] = Field(default=None, description="Mean of grade/max_grade*100 over all grades.")
    todayAttendance: AttendanceSummary

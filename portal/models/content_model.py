# /portal/models/content_model.py

"""
API contracts for assignments, quizzes and projects.

`target_phase` is deliberately required on every create model: an item
without an audience is rejected here, at the boundary, and never reaches the
visibility filter.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class TargetPhase(str, Enum):
    PHASE1 = "phase1"
    PHASE2 = "phase2"
    BOTH = "both"


class ContentKind(str, Enum):
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    PROJECT = "project"


# --- Create models (incoming) ---

class ContentCreateBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    target_phase: TargetPhase = Field(..., description="Audience of the item: 'phase1', 'phase2' or 'both'.")


class AssignmentCreate(ContentCreateBase):
    instructions: Optional[str] = None
    due_date: Optional[datetime] = None
    document_url: Optional[str] = None


class QuizCreate(ContentCreateBase):
    instructions: Optional[str] = None
    time_limit_minutes: int = Field(default=30, gt=0)
    start_time: Optional[datetime] = None


class ProjectCreate(ContentCreateBase):
    guidelines: Optional[str] = None
    due_date: Optional[datetime] = None
    is_collaborative: bool = False


# --- Read models (outgoing) ---

class ContentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    target_phase: TargetPhase
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class Assignment(ContentRead):
    instructions: Optional[str] = None
    due_date: Optional[datetime] = None
    document_url: Optional[str] = None


class Quiz(ContentRead):
    instructions: Optional[str] = None
    time_limit_minutes: int
    start_time: Optional[datetime] = None


class Project(ContentRead):
    guidelines: Optional[str] = None
    due_date: Optional[datetime] = None
    is_collaborative: bool = False


READ_MODELS = {
    ContentKind.ASSIGNMENT: Assignment,
    ContentKind.QUIZ: Quiz,
    ContentKind.PROJECT: Project,
}

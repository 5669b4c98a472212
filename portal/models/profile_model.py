# /portal/models/profile_model.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"


class Phase(str, Enum):
    PHASE1 = "phase1"
    PHASE2 = "phase2"


class Profile(BaseModel):
    """The public representation of a person known to the portal."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    full_name: str
    role: Role
    phase: Optional[Phase] = None
    created_at: Optional[datetime] = None


class StudentCreate(BaseModel):
    """Admin form for provisioning a new student account."""
    model_config = ConfigDict(use_enum_values=True)

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", description="Login e-mail of the student.")
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)
    phase: Phase = Field(default=Phase.PHASE1, description="The cohort the student belongs to.")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("full_name")
    @classmethod
    def full_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name must not be blank.")
        return v.strip()


class PhaseUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)
    phase: Phase


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

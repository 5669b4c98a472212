# /portal/routers/student_router.py

"""
Everything a student can see or do. Items are filtered to the caller's
phase and joined with the caller's own submission and grade only.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import get_current_student
from ..models import attendance_model, submission_model
from ..models.content_model import ContentKind
from ..services import attendance_service, submission_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _submit(kind: ContentKind, item_id: str, payload, student, db: DatabaseService):
    try:
        return submission_service.submit_work(kind, item_id, student, payload, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


# --- Coursework views ---

@router.get("/assignments", response_model=List[submission_model.StudentAssignmentItem], summary="My Assignments")
def my_assignments(student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return submission_service.student_items(ContentKind.ASSIGNMENT, student, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.get("/quizzes", response_model=List[submission_model.StudentQuizItem], summary="My Quizzes")
def my_quizzes(student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return submission_service.student_items(ContentKind.QUIZ, student, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.get("/projects", response_model=List[submission_model.StudentProjectItem], summary="My Projects")
def my_projects(student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return submission_service.student_items(ContentKind.PROJECT, student, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


# --- Submitting work ---

@router.post("/assignments/{item_id}/submission", response_model=submission_model.SubmissionRead,
             status_code=status.HTTP_201_CREATED, summary="Submit an Assignment")
def submit_assignment(item_id: str, payload: submission_model.SubmissionCreate,
                      student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    return _submit(ContentKind.ASSIGNMENT, item_id, payload, student, db)


@router.post("/projects/{item_id}/submission", response_model=submission_model.SubmissionRead,
             status_code=status.HTTP_201_CREATED, summary="Submit a Project")
def submit_project(item_id: str, payload: submission_model.SubmissionCreate,
                   student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    return _submit(ContentKind.PROJECT, item_id, payload, student, db)


@router.post("/quizzes/{item_id}/start", response_model=submission_model.SubmissionRead,
             status_code=status.HTTP_201_CREATED, summary="Start a Quiz Attempt")
def start_quiz(item_id: str, student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return submission_service.start_quiz(item_id, student, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.post("/quizzes/{item_id}/submission", response_model=submission_model.SubmissionRead,
             status_code=status.HTTP_201_CREATED, summary="Submit a Quiz")
def submit_quiz(item_id: str, payload: submission_model.SubmissionCreate,
                student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    return _submit(ContentKind.QUIZ, item_id, payload, student, db)


# --- Attendance ---

@router.get("/attendance", response_model=attendance_model.StudentAttendance, summary="My Attendance")
def my_attendance(student=Depends(get_current_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return attendance_service.student_attendance(student.id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)

# /portal/routers/admin_content_router.py

"""
Admin CRUD for coursework. Each kind has its own create endpoint because
the forms differ; listing and deleting behave the same for all three.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..core import errors
from ..core.deps import get_current_admin
from ..models import content_model
from ..models.content_model import ContentKind
from ..services import content_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _delete(kind: ContentKind, item_id: str, db: DatabaseService) -> Response:
    try:
        content_service.delete_item(kind, item_id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _list(kind: ContentKind, db: DatabaseService):
    try:
        return content_service.list_items(kind, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


def _create(kind: ContentKind, item_in, admin, db: DatabaseService):
    try:
        return content_service.create_item(kind, item_in, admin.id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


# --- ASSIGNMENTS ---

@router.get("/assignments", response_model=List[content_model.Assignment], summary="List Assignments",
            dependencies=[Depends(get_current_admin)])
def list_assignments(db: DatabaseService = Depends(get_db_service)):
    return _list(ContentKind.ASSIGNMENT, db)


@router.post("/assignments", response_model=content_model.Assignment, status_code=status.HTTP_201_CREATED, summary="Create an Assignment")
def create_assignment(item_in: content_model.AssignmentCreate, admin=Depends(get_current_admin), db: DatabaseService = Depends(get_db_service)):
    return _create(ContentKind.ASSIGNMENT, item_in, admin, db)


@router.delete("/assignments/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Assignment",
               dependencies=[Depends(get_current_admin)])
def delete_assignment(item_id: str, db: DatabaseService = Depends(get_db_service)):
    return _delete(ContentKind.ASSIGNMENT, item_id, db)


# --- QUIZZES ---

@router.get("/quizzes", response_model=List[content_model.Quiz], summary="List Quizzes",
            dependencies=[Depends(get_current_admin)])
def list_quizzes(db: DatabaseService = Depends(get_db_service)):
    return _list(ContentKind.QUIZ, db)


@router.post("/quizzes", response_model=content_model.Quiz, status_code=status.HTTP_201_CREATED, summary="Create a Quiz")
def create_quiz(item_in: content_model.QuizCreate, admin=Depends(get_current_admin), db: DatabaseService = Depends(get_db_service)):
    return _create(ContentKind.QUIZ, item_in, admin, db)


@router.delete("/quizzes/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Quiz",
               dependencies=[Depends(get_current_admin)])
def delete_quiz(item_id: str, db: DatabaseService = Depends(get_db_service)):
    return _delete(ContentKind.QUIZ, item_id, db)


# --- PROJECTS ---

@router.get("/projects", response_model=List[content_model.Project], summary="List Projects",
            dependencies=[Depends(get_current_admin)])
def list_projects(db: DatabaseService = Depends(get_db_service)):
    return _list(ContentKind.PROJECT, db)


@router.post("/projects", response_model=content_model.Project, status_code=status.HTTP_201_CREATED, summary="Create a Project")
def create_project(item_in: content_model.ProjectCreate, admin=Depends(get_current_admin), db: DatabaseService = Depends(get_db_service)):
    return _create(ContentKind.PROJECT, item_in, admin, db)


@router.delete("/projects/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Project",
               dependencies=[Depends(get_current_admin)])
def delete_project(item_id: str, db: DatabaseService = Depends(get_db_service)):
    return _delete(ContentKind.PROJECT, item_id, db)

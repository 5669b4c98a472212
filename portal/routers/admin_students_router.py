# /portal/routers/admin_students_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from ..core import errors
from ..core.deps import get_current_admin
from ..models import profile_model
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[profile_model.Profile], summary="List Students")
def list_students(phase: Optional[profile_model.Phase] = None, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.list_students(db, phase=phase.value if phase else None)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.post("", response_model=profile_model.Profile, status_code=status.HTTP_201_CREATED, summary="Provision a Student Account")
def provision_student(student_in: profile_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.provision_student(student_in, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.patch("/{student_id}/phase", response_model=profile_model.Profile, summary="Move a Student to Another Phase")
def update_phase(student_id: str, phase_update: profile_model.PhaseUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.update_phase(student_id, phase_update.phase, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.delete_student(student_id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

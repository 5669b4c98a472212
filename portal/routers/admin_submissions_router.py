# /portal/routers/admin_submissions_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, status as http_status

from ..core import errors
from ..core.deps import get_current_admin
from ..models import submission_model
from ..models.content_model import ContentKind
from ..models.submission_model import StoredSubmissionStatus
from ..services import submission_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/{kind}", response_model=List[submission_model.SubmissionDetails], summary="List Submissions of One Kind",
            dependencies=[Depends(get_current_admin)])
def list_submissions(kind: ContentKind, status: Optional[StoredSubmissionStatus] = None, db: DatabaseService = Depends(get_db_service)):
    """Newest first. Filter with `?status=pending` to get the grading queue."""
    try:
        return submission_service.list_submissions(kind, db, status=status.value if status else None)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.post("/{kind}/{submission_id}/grade", response_model=submission_model.Grade, status_code=http_status.HTTP_201_CREATED,
             summary="Grade a Submission")
def grade_submission(
    kind: ContentKind,
    submission_id: str,
    grade_in: submission_model.GradeCreate,
    admin=Depends(get_current_admin),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return submission_service.grade_submission(kind, submission_id, grade_in, admin.id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)

# /portal/routers/admin_dashboard_router.py

from fastapi import APIRouter, Depends

from ..core import errors
from ..core.deps import get_current_admin
from ..models.dashboard_model import AdminDashboardSummary
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get(
    "/summary",
    response_model=AdminDashboardSummary,
    summary="Get Admin Dashboard Summary",
    description="Roster, content, grading-backlog and today's attendance figures for the admin home page.",
)
def get_dashboard_summary(db: DatabaseService = Depends(get_db_service)):
    try:
        return dashboard_service.get_admin_summary(db=db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)

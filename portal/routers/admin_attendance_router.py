# /portal/routers/admin_attendance_router.py

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends

from ..core import errors
from ..core.deps import get_current_admin
from ..models import attendance_model
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[attendance_model.RosterEntry], summary="Attendance Roster for a Day",
            dependencies=[Depends(get_current_admin)])
def get_roster(date: Optional[dt.date] = None, db: DatabaseService = Depends(get_db_service)):
    """Defaults to today."""
    try:
        return attendance_service.roster_for_date(date or dt.date.today(), db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)


@router.put("", response_model=attendance_model.Attendance, summary="Mark a Student's Attendance")
def mark_attendance(
    mark: attendance_model.AttendanceMark,
    admin=Depends(get_current_admin),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return attendance_service.mark_attendance(mark, admin.id, db)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)

# /portal/core/deps.py

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from ..models.profile_model import Role
from ..services.database_service import DatabaseService, get_db_service
from .errors import PortalError, to_http_exception
from .security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_current_profile(
    token: str = Depends(oauth2_scheme),
    db: DatabaseService = Depends(get_db_service),
):
    """Resolves the bearer token to the caller's Profile row."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise credentials_exception

    try:
        profile = db.get_profile_by_id(user_id)
    except PortalError as e:
        raise to_http_exception(e)
    if profile is None:
        raise credentials_exception
    return profile


def get_current_admin(profile=Depends(get_current_profile)):
    if profile.role != Role.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions. Admin access required.",
        )
    return profile


def get_current_student(profile=Depends(get_current_profile)):
    if profile.role != Role.STUDENT.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This area is only available to students.",
        )
    return profile

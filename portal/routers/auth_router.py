# /portal/routers/auth_router.py

"""
Login and "who am I" for both roles. Accounts are created by an admin
through the students router, never self-registered.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from ..core import errors, security
from ..core.deps import get_current_profile
from ..models.profile_model import Profile, Token
from ..services import auth_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/token", response_model=Token, summary="Log In")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service),
):
    """OAuth2 password flow: the e-mail goes in the 'username' field."""
    try:
        profile = auth_service.authenticate(db, email=form_data.username, password=form_data.password)
    except errors.PortalError as e:
        raise errors.to_http_exception(e)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=security.create_access_token(subject=profile.id), token_type="bearer")


@router.get("/me", response_model=Profile, summary="Get the Current Profile")
def read_current_profile(current_profile=Depends(get_current_profile)):
    return current_profile

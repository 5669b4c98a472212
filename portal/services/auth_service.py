# /portal/services/auth_service.py

"""
Identity operations against the auth collaborator: sign-up, credential
checks and the optional bootstrap administrator.
"""

import logging
import uuid
from typing import Optional

from ..core import config, security
from ..core.errors import DuplicateRecordError, InvalidRecordError
from ..models.profile_model import Role
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def sign_up(db: DatabaseService, email: str, password: str, full_name: str, role: str, phase: Optional[str] = None):
    """
    Creates an auth identity and the profile keyed by its id as one
    all-or-nothing write. Returns the new Profile.
    """
    email = email.strip().lower()
    role = Role(role).value
    if role == Role.STUDENT.value and not phase:
        raise InvalidRecordError("Students must be assigned a phase.")
    if role == Role.ADMIN.value:
        phase = None

    if db.get_auth_user_by_email(email):
        raise DuplicateRecordError(f"An account with e-mail {email} already exists.")

    user_id = str(uuid.uuid4())
    auth_record = {"id": user_id, "email": email, "hashed_password": security.hash_password(password)}
    profile_record = {"id": user_id, "email": email, "full_name": full_name, "role": role, "phase": phase}
    profile = db.sign_up(auth_record, profile_record)
    logger.info("Signed up %s %s (%s)", role, email, user_id)
    return profile


def authenticate(db: DatabaseService, email: str, password: str):
    """Returns the caller's Profile when the credentials match, else None."""
    auth_user = db.get_auth_user_by_email(email.strip().lower())
    if auth_user is None or not security.verify_password(password, auth_user.hashed_password):
        logger.warning("Failed login attempt for %s", email)
        return None
    return db.get_profile_by_id(auth_user.id)


def ensure_bootstrap_admin(db: DatabaseService) -> None:
    """Creates the administrator named by ADMIN_EMAIL/ADMIN_PASSWORD if missing."""
    if not (config.ADMIN_EMAIL and config.ADMIN_PASSWORD):
        return
    if db.get_auth_user_by_email(config.ADMIN_EMAIL.strip().lower()):
        return
    sign_up(db, config.ADMIN_EMAIL, config.ADMIN_PASSWORD, config.ADMIN_FULL_NAME, Role.ADMIN.value)

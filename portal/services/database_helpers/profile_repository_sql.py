# /portal/services/database_helpers/profile_repository_sql.py

"""
Queries for the auth collaborator's identities and the profiles keyed on them.
"""

from typing import Dict, Optional

from sqlalchemy import select

from ...core.errors import DuplicateRecordError
from ...db.models.profile_models import AuthUser, Profile
from .base_repository_sql import BaseRepositorySQL


class ProfileRepositorySQL(BaseRepositorySQL):

    def get_auth_user_by_email(self, email: str) -> Optional[AuthUser]:
        stmt = select(AuthUser).where(AuthUser.email == email)
        return self._fetch_first(stmt, "Looking up an identity")

    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == profile_id)
        return self._fetch_first(stmt, "Looking up a profile")

    def add_user_with_profile(self, auth_record: Dict, profile_record: Dict) -> Profile:
        """
        Creates the identity and its profile in one commit: either both rows
        exist afterwards or neither does.
        """
        auth_user = AuthUser(**auth_record)
        profile = Profile(**profile_record)
        auth_user.profile = profile
        self.db.add(auth_user)
        self._commit(f"Signing up {auth_record.get('email')}", conflict_error=DuplicateRecordError)
        self.db.refresh(profile)
        return profile

    def delete_user(self, user_id: str) -> bool:
        """Removes the identity; the profile and everything it owns follows."""
        auth_user = self.db.get(AuthUser, user_id)
        if auth_user is None:
            return False
        self.db.delete(auth_user)
        self._commit(f"Deleting user {user_id}")
        return True

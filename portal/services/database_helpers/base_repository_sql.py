# /portal/services/database_helpers/base_repository_sql.py

import logging
from typing import Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)


class BaseRepositorySQL:
    """
    Shared plumbing for the SQL repositories.

    Every public write method of a repository ends in exactly one `_commit`,
    so each call is one all-or-nothing unit of work. On failure the session
    is rolled back before the domain error is raised.
    """

    def __init__(self, db_session: Session):
        self.db = db_session

    def _commit(self, action: str, conflict_error: Type[ConflictError] = ConflictError):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("%s rejected by the store: %s", action, e.orig)
            raise conflict_error(f"{action} conflicts with an existing record.") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("%s failed.", action, exc_info=True)
            raise StorageError(f"{action} failed: {e}") from e

    def _fetch_all(self, stmt, action: str):
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("%s failed.", action, exc_info=True)
            raise StorageError(f"{action} failed: {e}") from e

    def _fetch_first(self, stmt, action: str):
        rows = self._fetch_all(stmt.limit(1), action)
        return rows[0] if rows else None

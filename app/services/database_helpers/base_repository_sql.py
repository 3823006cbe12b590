# /app/services/database_helpers/base_repository_sql.py

"""
Shared plumbing for the SQL repositories.

Each repository wraps one request-scoped SQLAlchemy session. A service's
pre-checks and its write run on that same session and are committed once,
so they share a single transaction. If the database still rejects the write
with a constraint violation (two concurrent creates racing past the same
pre-check), the transaction is rolled back and reported as a conflict.
"""

from typing import Optional

from sqlalchemy import Column
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.core.app_logger import get_logger
from app.core.exceptions import ConflictError

logger = get_logger("repository")


def scope_to_school(query: Query, column: Column, school_id: Optional[int]) -> Query:
    """Restricts `query` to one school. `None` means unrestricted."""
    if school_id is None:
        return query
    return query.filter(column == school_id)


class BaseRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _commit(self, conflict_message: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Write rejected by a database constraint: %s", e.orig)
            raise ConflictError(conflict_message) from e

    def _save(self, obj, conflict_message: str):
        self.db.add(obj)
        self._commit(conflict_message)
        self.db.refresh(obj)
        return obj

    def _remove(self, obj, conflict_message: str) -> bool:
        self.db.delete(obj)
        self._commit(conflict_message)
        return True

"""
Shared repository plumbing.

Every read goes through :meth:`BaseRepository._exec` or
:meth:`BaseRepository._get` and every write through
:meth:`BaseRepository._commit`.  All of them roll the session back and
re-raise store failures as :class:`~app.booster.errors.PersistenceError`.
"""

import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.booster.errors import PersistenceError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Holds the session and the commit/rollback policy."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def _exec(self, statement) -> list:
        """Run a select and fetch every row."""
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            self._fail("read", e)

    def _first(self, statement) -> Optional[Any]:
        rows = self._exec(statement.limit(1))
        return rows[0] if rows else None

    def _get(self, model, pk: int) -> Optional[Any]:
        try:
            return self.session.get(model, pk)
        except SQLAlchemyError as e:
            self._fail("read", e)

    def _commit(self, *instances) -> None:
        try:
            self.session.commit()
            for instance in instances:
                self.session.refresh(instance)
        except SQLAlchemyError as e:
            self._fail("write", e)

    def _flush(self) -> None:
        try:
            self.session.flush()
        except SQLAlchemyError as e:
            self._fail("flush", e)

    def _fail(self, action: str, error: SQLAlchemyError):
        self.session.rollback()
        logger.error("Store %s failed: %s", action, error)
        raise PersistenceError(str(error)) from error

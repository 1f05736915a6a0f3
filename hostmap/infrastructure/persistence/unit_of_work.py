"""Database Unit of Work implementation for transaction boundary management.

This module provides the concrete implementation of the UnitOfWork pattern,
handling transaction management over one SQLAlchemy session per unit.
"""

from typing import Self

from sqlalchemy.orm import Session, sessionmaker

from hostmap.config import get_logger
from hostmap.infrastructure.persistence.database.db_connection import (
    get_session_factory,
)

logger = get_logger(__name__)


class DatabaseUnitOfWork:
    """Database implementation of the Unit of Work pattern.

    The unit of work owns its session. On exit it rolls back if an exception
    escaped, commits if the caller never committed explicitly, and always
    closes the session so the connection returns to the pool.
    """

    def __init__(self, session: Session) -> None:
        """Initialize with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session
        self._committed = False

    @property
    def session(self) -> Session:
        """Session shared by every repository created for this unit."""
        return self._session

    @property
    def committed(self) -> bool:
        return self._committed

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        try:
            if exc_type is not None:
                self.rollback()
            elif not self._committed:
                self.commit()
        finally:
            self._session.close()

    def commit(self) -> None:
        """Explicitly commit the current transaction."""
        self._session.commit()
        self._committed = True

    def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        logger.debug("Rolling back unit of work")
        self._session.rollback()


class DatabaseUnitOfWorkProvider:
    """Hands out a new unit of work, and a new session, per call."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory

    def get_unit_of_work(self) -> DatabaseUnitOfWork:
        """Begin a new transactional unit."""
        factory = self._session_factory or get_session_factory()
        return DatabaseUnitOfWork(factory())

"""SQLAlchemy database models for hostmap.

Defines the persisted tables using SQLAlchemy 2.0 typed declarative mappings.
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData, String, UniqueConstraint
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from hostmap.config import get_logger

logger = get_logger(__name__)

# Define naming convention for constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",  # Index
    "uq": "uq_%(table_name)s_%(column_0_label)s",  # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",  # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",  # Primary key
}

metadata = MetaData(naming_convention=convention)


class HostmapDBBase(DeclarativeBase):
    """Base class for all database models with timestamps."""

    metadata = metadata

    id: Mapped[int] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class DBDomain(HostmapDBBase):
    """Hostname binding to a root content node."""

    __tablename__ = "domains"

    domain_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Lowercased in Python; SQLite lower() only folds ASCII
    name_key: Mapped[str] = mapped_column(String(255), nullable=False)
    is_wildcard: Mapped[bool] = mapped_column(default=False, nullable=False)
    root_content_id: Mapped[int | None] = mapped_column(index=True)
    language_id: Mapped[int | None]
    language_iso_code: Mapped[str | None] = mapped_column(String(14))

    __table_args__ = (
        UniqueConstraint("domain_name"),
        UniqueConstraint("name_key"),
    )


def init_db(engine: Engine | None = None) -> None:
    """Initialize database schema.

    Creates all tables if they don't exist.
    This is a safe operation that won't affect existing data.
    """
    from sqlalchemy import inspect

    from hostmap.infrastructure.persistence.database.db_connection import get_engine

    engine = engine or get_engine()

    try:
        existing_tables = inspect(engine).get_table_names()
        if existing_tables:
            logger.info(f"Found existing tables: {existing_tables}")

        # SQLAlchemy skips tables that already exist
        HostmapDBBase.metadata.create_all(engine)
        logger.info("Database schema verified - all tables exist")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise
    else:
        logger.info("Database schema initialization complete")

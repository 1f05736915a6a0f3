"""SQLAlchemy database configuration and connection management.

This module is responsible for:
- Engine creation and configuration
- Session factory management
"""

from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hostmap.config import get_logger, settings

logger = get_logger(__name__)


def create_db_engine(connection_string: str | None = None) -> Engine:
    """Create SQLAlchemy engine, applying SQLite pragmas when appropriate."""
    db_url = connection_string or settings.database.url
    url = make_url(db_url)

    engine_kwargs = {
        "echo": settings.database.echo,
        "pool_pre_ping": settings.database.pool_pre_ping,
    }

    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **engine_kwargs)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _):  # pragma: no cover
            """Set SQLite PRAGMAs on connection creation."""
            cursor = dbapi_connection.cursor()
            cursor.execute(f"PRAGMA busy_timeout = {settings.database.busy_timeout_ms}")
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    logger.info(f"Created database engine for {url.render_as_string(hide_password=True)}")
    return engine


# Global engine singleton
_engine: Engine | None = None


def get_engine() -> Engine:
    """Get or create the global database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def create_session_factory(engine: Engine | None = None) -> sessionmaker[Session]:
    """Create a session factory for the given engine.

    Args:
        engine: Optional engine (uses global engine if None)
    """
    return sessionmaker(
        bind=engine or get_engine(),
        expire_on_commit=False,  # Entities stay readable after commit
        autoflush=True,
    )


# Global session factory singleton
_session_factory: sessionmaker[Session] | None = None


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the global session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory()
    return _session_factory


def reset_connection_state() -> None:
    """Dispose the global engine and forget the cached factories."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


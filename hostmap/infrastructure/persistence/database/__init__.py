"""Database models and connection management."""

from .db_connection import (
    create_db_engine,
    create_session_factory,
    get_engine,
    get_session_factory,
    reset_connection_state,
)
from .db_models import DBDomain, HostmapDBBase, init_db

__all__ = [
    "DBDomain",
    "HostmapDBBase",
    "create_db_engine",
    "create_session_factory",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_connection_state",
]

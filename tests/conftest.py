"""Shared fixtures: an in-memory database and the service wired on top of it."""

import pytest

from hostmap.application.services import ServiceEvents
from hostmap.domain.entities import Domain
from hostmap.infrastructure.context import create_domain_service
from hostmap.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from hostmap.infrastructure.persistence.repositories import DomainRepository


@pytest.fixture
def engine():
    """Fresh in-memory SQLite engine with the schema created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return create_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    """Provide database session with automatic rollback."""
    with session_factory() as session:
        yield session
        session.rollback()


@pytest.fixture
def domain_repo(db_session):
    """Provide a domain repository."""
    return DomainRepository(db_session)


@pytest.fixture
def service_events():
    """Observer registry owned by the test."""
    events = ServiceEvents()
    yield events
    events.clear()


@pytest.fixture
def domain_service(session_factory, service_events):
    """DomainService backed by the in-memory database."""
    return create_domain_service(session_factory, events=service_events)


@pytest.fixture
def domain():
    """Basic unsaved domain bound to a content node."""
    return Domain(
        domain_name="example.com",
        root_content_id=1054,
        language_id=1,
        language_iso_code="en-US",
    )


@pytest.fixture
def wildcard_domain():
    """Wildcard domain assigning a culture to a content branch."""
    return Domain(domain_name="*1054", root_content_id=1054, language_id=2)

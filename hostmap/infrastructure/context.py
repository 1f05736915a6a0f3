"""Wiring of the domain service to its SQLAlchemy collaborators."""

from sqlalchemy.orm import Session, sessionmaker

from hostmap.application.services import DomainService, ServiceEvents
from hostmap.infrastructure.persistence.repositories import RepositoryFactory
from hostmap.infrastructure.persistence.unit_of_work import DatabaseUnitOfWorkProvider


def create_domain_service(
    session_factory: sessionmaker[Session] | None = None,
    events: ServiceEvents | None = None,
) -> DomainService:
    """Build a DomainService backed by the configured database.

    Args:
        session_factory: Session factory to use; defaults to the global one
        events: Observer registry to share; a fresh one is created when omitted
    """
    return DomainService(
        uow_provider=DatabaseUnitOfWorkProvider(session_factory),
        repository_factory=RepositoryFactory(),
        events=events,
    )

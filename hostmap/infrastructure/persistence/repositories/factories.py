"""Repository factory for session-aware repository creation.

Keeps session management in the infrastructure layer; the service layer only
sees the domain protocols.
"""

from hostmap.domain.repositories.interfaces import DomainRepositoryProtocol
from hostmap.infrastructure.persistence.repositories.domain import DomainRepository
from hostmap.infrastructure.persistence.unit_of_work import DatabaseUnitOfWork


class RepositoryFactory:
    """Creates repositories sharing a unit of work's transaction."""

    def create_domain_repository(
        self, uow: DatabaseUnitOfWork
    ) -> DomainRepositoryProtocol:
        """Get domain repository using this unit of work's session."""
        return DomainRepository(uow.session)

"""Domain repository interfaces.

These interfaces define the contracts for data access without depending on
infrastructure implementations. The service layer depends only on these.
"""

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from hostmap.domain.entities import Domain


class DomainRepositoryProtocol(Protocol):
    """Repository interface for domain persistence operations."""

    def exists(self, domain_name: str) -> bool:
        """Check whether a domain with this name is stored (case-insensitive)."""
        ...

    def get_by_name(self, domain_name: str) -> "Domain | None":
        """Get domain by name (case-insensitive)."""
        ...

    def get(self, id_: int) -> "Domain | None":
        """Get domain by ID."""
        ...

    def get_all(self, include_wildcards: bool) -> list["Domain"]:
        """Get all domains, optionally including wildcard domains."""
        ...

    def get_assigned_domains(
        self, content_id: int, include_wildcards: bool
    ) -> list["Domain"]:
        """Get the domains bound to a content node."""
        ...

    def add_or_update(self, domain: "Domain") -> "Domain":
        """Insert a new domain or update an existing one.

        Returns:
            The persisted domain, with its database ID set
        """
        ...

    def delete(self, domain: "Domain") -> None:
        """Remove a stored domain."""
        ...


class UnitOfWorkProtocol(Protocol):
    """Unit of Work interface for transaction boundary management.

    Each UnitOfWork instance manages a single database transaction. It is used
    as a context manager: the transaction is rolled back if an exception
    escapes, committed if the caller never committed explicitly, and the
    underlying connection is always released on exit.
    """

    def __enter__(self) -> Self:
        """Enter context manager."""
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit context manager with automatic commit/rollback."""
        ...

    def commit(self) -> None:
        """Explicitly commit the current transaction."""
        ...

    def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        ...


class UnitOfWorkProviderProtocol(Protocol):
    """Creates a fresh unit of work per service call."""

    def get_unit_of_work(self) -> UnitOfWorkProtocol:
        """Begin a new transactional unit."""
        ...


class RepositoryFactoryProtocol(Protocol):
    """Creates repositories bound to a unit of work."""

    def create_domain_repository(
        self, uow: UnitOfWorkProtocol
    ) -> DomainRepositoryProtocol:
        """Create a domain repository sharing the unit of work's transaction."""
        ...

"""Domain repository interfaces.

These interfaces define the contracts for data access without depending on
infrastructure implementations, following the dependency inversion principle.
"""

from .interfaces import (
    DomainRepositoryProtocol,
    RepositoryFactoryProtocol,
    UnitOfWorkProtocol,
    UnitOfWorkProviderProtocol,
)

__all__ = [
    "DomainRepositoryProtocol",
    "RepositoryFactoryProtocol",
    "UnitOfWorkProtocol",
    "UnitOfWorkProviderProtocol",
]

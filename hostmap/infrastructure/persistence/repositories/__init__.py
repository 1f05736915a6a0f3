"""Repository layer for database operations with SQLAlchemy 2.0."""

from hostmap.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
    ModelMapper,
)
from hostmap.infrastructure.persistence.repositories.domain import (
    DomainMapper,
    DomainRepository,
)
from hostmap.infrastructure.persistence.repositories.factories import (
    RepositoryFactory,
)
from hostmap.infrastructure.persistence.repositories.repo_decorator import db_operation

__all__ = [
    "BaseModelMapper",
    "BaseRepository",
    "DomainMapper",
    "DomainRepository",
    "ModelMapper",
    "RepositoryFactory",
    "db_operation",
]

"""Repository for hostname domain bindings."""

from attrs import define
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement

from hostmap.config import get_logger
from hostmap.domain.entities import Domain
from hostmap.domain.exceptions import DomainNotFoundError, DuplicateDomainNameError
from hostmap.infrastructure.persistence.database.db_models import DBDomain
from hostmap.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
)
from hostmap.infrastructure.persistence.repositories.repo_decorator import db_operation

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class DomainMapper(BaseModelMapper[DBDomain, Domain]):
    """Maps between DBDomain and Domain domain models."""

    @staticmethod
    def to_domain(db_model: DBDomain) -> Domain:
        return Domain(
            domain_name=db_model.domain_name,
            root_content_id=db_model.root_content_id,
            language_id=db_model.language_id,
            language_iso_code=db_model.language_iso_code,
            id=db_model.id,
        )

    @staticmethod
    def to_db(domain_model: Domain) -> DBDomain:
        return DBDomain(
            id=domain_model.id,
            domain_name=domain_model.domain_name,
            name_key=name_key(domain_model.domain_name),
            is_wildcard=domain_model.is_wildcard,
            root_content_id=domain_model.root_content_id,
            language_id=domain_model.language_id,
            language_iso_code=domain_model.language_iso_code,
        )


def name_key(domain_name: str) -> str:
    """Case-insensitive lookup key stored beside the name."""
    return domain_name.lower()


def _name_matches(domain_name: str) -> ColumnElement[bool]:
    return DBDomain.name_key == name_key(domain_name)


def _not_wildcard() -> ColumnElement[bool]:
    return DBDomain.is_wildcard.is_(False)


class DomainRepository(BaseRepository[DBDomain, Domain]):
    """Repository for domain operations."""

    def __init__(self, session: Session) -> None:
        """Initialize repository with session and mapper."""
        super().__init__(
            session=session,
            model_class=DBDomain,
            mapper=DomainMapper(),
        )

    @db_operation("domain_exists")
    def exists(self, domain_name: str) -> bool:
        return self.count_entities([_name_matches(domain_name)]) > 0

    @db_operation("get_domain_by_name")
    def get_by_name(self, domain_name: str) -> Domain | None:
        return self.find_one_by([_name_matches(domain_name)])

    @db_operation("get_domain")
    def get(self, id_: int) -> Domain | None:
        return self.find_one_by({"id": id_})

    @db_operation("get_all_domains")
    def get_all(self, include_wildcards: bool) -> list[Domain]:
        conditions = [] if include_wildcards else [_not_wildcard()]
        return self.find_by(conditions, order_by=("id", True))

    @db_operation("get_assigned_domains")
    def get_assigned_domains(
        self, content_id: int, include_wildcards: bool
    ) -> list[Domain]:
        conditions = [DBDomain.root_content_id == content_id]
        if not include_wildcards:
            conditions.append(_not_wildcard())
        return self.find_by(conditions, order_by=("id", True))

    @db_operation("add_or_update_domain")
    def add_or_update(self, domain: Domain) -> Domain:
        """Insert a new domain or update the stored one with the same ID.

        Raises:
            DuplicateDomainNameError: another domain already uses the name
            DomainNotFoundError: the domain has an ID that is not stored
        """
        self._ensure_unique_name(domain)

        if domain.id is None:
            saved = self.create(domain)
            logger.debug(f"Inserted domain with ID {saved.id}")
            return saved

        updated = self.update(domain.id, domain)
        if updated is None:
            raise DomainNotFoundError(domain.id)
        return updated

    @db_operation("delete_domain")
    def delete(self, domain: Domain) -> None:
        """Remove a stored domain.

        Raises:
            DomainNotFoundError: the domain was never saved or is already gone
        """
        if domain.id is None:
            raise DomainNotFoundError(domain.domain_name)
        if self.hard_delete(domain.id) == 0:
            raise DomainNotFoundError(domain.id)

    def _ensure_unique_name(self, domain: Domain) -> None:
        conditions = [_name_matches(domain.domain_name)]
        if domain.id is not None:
            conditions.append(DBDomain.id != domain.id)
        if self.count_entities(conditions) > 0:
            raise DuplicateDomainNameError(domain.domain_name)

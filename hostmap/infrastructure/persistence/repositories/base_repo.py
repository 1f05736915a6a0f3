"""Repository layer for database operations with SQLAlchemy 2.0 best practices."""

from datetime import UTC, datetime
from typing import Any, Protocol, TypeVar

from attrs import define
from sqlalchemy import Select, delete, func, inspect, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement

from hostmap.config import get_logger
from hostmap.infrastructure.persistence.database.db_models import HostmapDBBase
from hostmap.infrastructure.persistence.repositories.repo_decorator import db_operation

TDBModel = TypeVar("TDBModel", bound=HostmapDBBase)
TDomainModel = TypeVar("TDomainModel")

logger = get_logger(__name__)


class ModelMapper[TDBModel: HostmapDBBase, TDomainModel](Protocol):
    """Protocol for bidirectional mapping between models."""

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        """Convert database model to domain model."""
        ...

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        """Convert domain model to database model."""
        ...

    @staticmethod
    def map_collection(db_models: list[TDBModel]) -> list[TDomainModel]:
        """Map a collection of DB models to domain models."""
        ...


@define(frozen=True, slots=True)
class BaseModelMapper[TDBModel: HostmapDBBase, TDomainModel]:
    """Base implementation of ModelMapper with common functionality.

    Usage:
        @define(frozen=True, slots=True)
        class DomainMapper(BaseModelMapper[DBDomain, Domain]):
            @staticmethod
            def to_domain(db_model: DBDomain) -> Domain:
                return Domain(...)

            @staticmethod
            def to_db(domain_model: Domain) -> DBDomain:
                return DBDomain(...)
    """

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        raise NotImplementedError("Subclasses must implement to_domain")

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        raise NotImplementedError("Subclasses must implement to_db")

    @classmethod
    def map_collection(cls, db_models: list[TDBModel]) -> list[TDomainModel]:
        """Map a collection of DB models to domain models.

        Uses cls.to_domain so the subclass implementation is called.
        """
        if not db_models:
            return []
        return [cls.to_domain(db_model) for db_model in db_models if db_model]


class BaseRepository[TDBModel: HostmapDBBase, TDomainModel]:
    """Base repository for database operations with SQLAlchemy 2.0 best practices."""

    def __init__(
        self,
        session: Session,
        model_class: type[TDBModel],
        mapper: ModelMapper[TDBModel, TDomainModel],
    ) -> None:
        """Initialize repository with session and model mappings."""
        self.session = session
        self.model_class = model_class
        self.mapper = mapper
        logger.debug(
            f"Initialized {self.__class__.__name__} for {model_class.__name__}",
        )

    # -------------------------------------------------------------------------
    # SELECT STATEMENT BUILDERS
    # -------------------------------------------------------------------------

    def order_by(
        self, stmt: Select[tuple[TDBModel]], field: str, ascending: bool = True
    ) -> Select[tuple[TDBModel]]:
        """Add ordering to a select statement."""
        order_col = getattr(self.model_class, field)
        return stmt.order_by(order_col if ascending else order_col.desc())

    def count(
        self, conditions: dict[str, Any] | list[ColumnElement] | None = None
    ) -> Select:
        """Create a count statement for records matching conditions."""
        stmt = select(func.count(self.model_class.id))

        if conditions:
            match conditions:
                case dict():
                    for field, value in conditions.items():
                        stmt = stmt.where(getattr(self.model_class, field) == value)
                case list():
                    for condition in conditions:
                        stmt = stmt.where(condition)

        return stmt

    # -------------------------------------------------------------------------
    # DIRECT DATABASE OPERATIONS (non-decorated helpers)
    # -------------------------------------------------------------------------

    def _execute_query(self, stmt: Select[tuple[TDBModel]]) -> list[TDBModel]:
        """Execute a query and return all results directly."""
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    def _execute_scalar(self, stmt: Select) -> Any:
        """Execute a scalar query and return the first result."""
        return self.session.scalar(stmt)

    # -------------------------------------------------------------------------
    # DECORATED DATABASE OPERATIONS
    # -------------------------------------------------------------------------

    @db_operation("count_entities")
    def count_entities(
        self, conditions: dict[str, Any] | list[ColumnElement] | None = None
    ) -> int:
        """Count entities matching the given conditions."""
        count = self._execute_scalar(self.count(conditions))
        return count or 0

    @db_operation("find_by")
    def find_by(
        self,
        conditions: dict[str, Any] | list[ColumnElement],
        order_by: tuple[str, bool] | None = None,
        limit: int | None = None,
    ) -> list[TDomainModel]:
        """Find entities matching conditions."""
        stmt = select(self.model_class)

        match conditions:
            case dict():
                for field, value in conditions.items():
                    stmt = stmt.where(getattr(self.model_class, field) == value)
            case list():
                for condition in conditions:
                    stmt = stmt.where(condition)

        if order_by:
            field, ascending = order_by
            stmt = self.order_by(stmt, field, ascending)

        if limit is not None:
            stmt = stmt.limit(limit)

        return self.mapper.map_collection(self._execute_query(stmt))

    @db_operation("find_one_by")
    def find_one_by(
        self, conditions: dict[str, Any] | list[ColumnElement]
    ) -> TDomainModel | None:
        """Find a single entity matching conditions or None if not found."""
        if isinstance(conditions, dict) and len(conditions) == 1 and "id" in conditions:
            db_entity = self.session.get(self.model_class, conditions["id"])
            return self.mapper.to_domain(db_entity) if db_entity else None

        results = self.find_by(conditions, order_by=("id", True), limit=1)
        return results[0] if results else None

    @db_operation("create")
    def create(self, entity: TDomainModel) -> TDomainModel:
        """Create new entity and return it with its generated ID."""
        db_entity = self.mapper.to_db(entity)
        self.session.add(db_entity)
        self.session.flush()

        if db_entity.id is None:
            logger.error(f"Failed to generate ID for entity: {entity}")
            raise ValueError("Failed to create entity: No ID was generated")

        return self.mapper.to_domain(db_entity)

    @db_operation("update")
    def update(self, id_: int, entity: TDomainModel) -> TDomainModel | None:
        """Update all mapped columns of a row from a domain model.

        Returns:
            The updated entity, or None when no row has this ID
        """
        update_db = self.mapper.to_db(entity)
        columns = [
            c.key
            for c in inspect(self.model_class).columns
            if c.key not in ("id", "created_at", "updated_at")
        ]
        values = {k: getattr(update_db, k) for k in columns}
        values["updated_at"] = datetime.now(UTC)

        stmt = (
            update(self.model_class)
            .where(self.model_class.id == id_)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        db_entity = self.session.get(self.model_class, id_, populate_existing=True)
        return self.mapper.to_domain(db_entity)

    @db_operation("hard_delete")
    def hard_delete(self, id_: int) -> int:
        """Delete a row by ID and return the number of rows removed."""
        stmt = (
            delete(self.model_class)
            .where(self.model_class.id == id_)
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(stmt)
        return result.rowcount

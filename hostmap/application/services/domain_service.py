"""Domain service: lookups and cancellable save/delete of hostname bindings.

Every operation opens its own unit of work, asks the repository factory for a
domain repository bound to it, makes one repository call and commits. Read
operations commit too, so the unit of work contract is the same on every path.

Save and delete are two-phase: the "before" event runs first and may cancel
the operation, in which case no unit of work is opened at all. Otherwise the
write is committed and the "after" event is raised with the same messages.
Errors from observers, the repository or the unit of work are not caught.
"""

from collections.abc import Callable

from hostmap.application.services.events import ServiceEvents
from hostmap.config import get_logger
from hostmap.domain.entities import Attempt, Domain, EventMessages, OperationStatus
from hostmap.domain.events import DeleteEventArgs, SaveEventArgs
from hostmap.domain.repositories.interfaces import (
    RepositoryFactoryProtocol,
    UnitOfWorkProviderProtocol,
)

logger = get_logger(__name__)


class DomainService:
    """Facade over the domain repository for application code."""

    def __init__(
        self,
        uow_provider: UnitOfWorkProviderProtocol,
        repository_factory: RepositoryFactoryProtocol,
        events: ServiceEvents | None = None,
        event_messages_factory: Callable[[], EventMessages] = EventMessages,
    ) -> None:
        """Initialize with collaborators.

        Args:
            uow_provider: Begins a unit of work per call
            repository_factory: Creates domain repositories bound to a unit of work
            events: Observer registry; a fresh one is created when omitted
            event_messages_factory: Creates the message bag for each mutation
        """
        self.uow_provider = uow_provider
        self.repository_factory = repository_factory
        self.events = events if events is not None else ServiceEvents()
        self.event_messages_factory = event_messages_factory

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def exists(self, domain_name: str) -> bool:
        _require(domain_name, "domain_name")
        with self.uow_provider.get_unit_of_work() as uow:
            repo = self.repository_factory.create_domain_repository(uow)
            ret = repo.exists(domain_name)
            uow.commit()
        logger.debug(
            "Domain {domain_name} exists: {found}", domain_name=domain_name, found=ret
        )
        return ret

    def get_by_name(self, name: str) -> Domain | None:
        _require(name, "name")
        with self.uow_provider.get_unit_of_work() as uow:
            repo = self.repository_factory.create_domain_repository(uow)
            ret = repo.get_by_name(name)
            uow.commit()
        logger.debug("Looked up domain {name}", name=name, found=ret is not None)
        return ret

    def get_by_id(self, id_: int) -> Domain | None:
        _require(id_, "id_")
        with self.uow_provider.get_unit_of_work() as uow:
            repo = self.repository_factory.create_domain_repository(uow)
            ret = repo.get(id_)
            uow.commit()
        logger.debug(
            "Looked up domain {domain_id}", domain_id=id_, found=ret is not None
        )
        return ret

    def get_all(self, include_wildcards: bool) -> list[Domain]:
        with self.uow_provider.get_unit_of_work() as uow:
            repo = self.repository_factory.create_domain_repository(uow)
            ret = repo.get_all(include_wildcards)
            uow.commit()
        logger.debug(
            "Loaded {count} domains", count=len(ret), include_wildcards=include_wildcards
        )
        return ret

    def get_assigned_domains(
        self, content_id: int, include_wildcards: bool
    ) -> list[Domain]:
        _require(content_id, "content_id")
        with self.uow_provider.get_unit_of_work() as uow:
            repo = self.repository_factory.create_domain_repository(uow)
            ret = repo.get_assigned_domains(content_id, include_wildcards)
            uow.commit()
        logger.debug(
            "Loaded {count} domains for content {content_id}",
            count=len(ret),
            content_id=content_id,
        )
        return ret

    # -------------------------------------------------------------------------
    # MUTATIONS
    # -------------------------------------------------------------------------

    def save(self, domain: Domain) -> Attempt[OperationStatus]:
        """Insert or update a domain unless a "saving" observer cancels."""
        _require(domain, "domain")
        evt_msgs = self.event_messages_factory()
        if self.events.saving.is_raised_event_cancelled(
            SaveEventArgs(messages=evt_msgs, saved_entities=[domain]), self
        ):
            logger.info(
                "Save of domain {domain_name} cancelled",
                domain_name=domain.domain_name,
            )
            return OperationStatus.cancelled(evt_msgs)

        with self.uow_provider.get_unit_of_work() as uow:
            repository = self.repository_factory.create_domain_repository(uow)
            saved = repository.add_or_update(domain)
            uow.commit()

        self.events.saved.raise_event(
            SaveEventArgs(messages=evt_msgs, can_cancel=False, saved_entities=[saved]),
            self,
        )
        logger.info(
            "Saved domain {domain_name}",
            domain_name=saved.domain_name,
            domain_id=saved.id,
        )
        return OperationStatus.success(evt_msgs, entity=saved)

    def delete(self, domain: Domain) -> Attempt[OperationStatus]:
        """Remove a stored domain unless a "deleting" observer cancels."""
        _require(domain, "domain")
        evt_msgs = self.event_messages_factory()
        if self.events.deleting.is_raised_event_cancelled(
            DeleteEventArgs(messages=evt_msgs, deleted_entities=[domain]), self
        ):
            logger.info(
                "Delete of domain {domain_name} cancelled",
                domain_name=domain.domain_name,
            )
            return OperationStatus.cancelled(evt_msgs)

        with self.uow_provider.get_unit_of_work() as uow:
            repository = self.repository_factory.create_domain_repository(uow)
            repository.delete(domain)
            uow.commit()

        self.events.deleted.raise_event(
            DeleteEventArgs(
                messages=evt_msgs, can_cancel=False, deleted_entities=[domain]
            ),
            self,
        )
        logger.info(
            "Deleted domain {domain_name}",
            domain_name=domain.domain_name,
            domain_id=domain.id,
        )
        return OperationStatus.success(evt_msgs)


def _require(value: object, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")

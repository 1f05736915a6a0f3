"""Operation outcome entities.

Event messages collected during a service call and the status/attempt wrappers
returned by mutating operations.
"""

from collections.abc import Iterator
from enum import StrEnum, auto
from typing import Any

from attrs import define, field

from .domain import Domain


class EventMessageType(StrEnum):
    """Severity of a message raised during an operation."""

    DEFAULT = auto()
    INFO = auto()
    ERROR = auto()
    SUCCESS = auto()
    WARNING = auto()


@define(frozen=True, slots=True)
class EventMessage:
    """A message for the caller's UI or log, raised by an observer or the repository."""

    category: str
    message: str
    message_type: EventMessageType = EventMessageType.DEFAULT


@define(slots=True)
class EventMessages:
    """Mutable per-call bag of event messages."""

    _messages: list[EventMessage] = field(factory=list, alias="messages")

    def add(self, message: EventMessage) -> None:
        """Append a message to the bag."""
        self._messages.append(message)

    def get_all(self) -> list[EventMessage]:
        """Return a snapshot of all messages in insertion order."""
        return list(self._messages)

    @property
    def count(self) -> int:
        return len(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[EventMessage]:
        return iter(list(self._messages))


class OperationStatusType(StrEnum):
    """Outcome of a mutating service operation."""

    SUCCESS = auto()
    FAILED_CANCELLED_BY_EVENT = auto()


@define(frozen=True, slots=True)
class Attempt[T]:
    """Result of an operation that may fail without raising."""

    success: bool
    result: T | None = None

    @classmethod
    def succeed(cls, result: Any = None) -> "Attempt[Any]":
        return cls(success=True, result=result)

    @classmethod
    def fail(cls, result: Any = None) -> "Attempt[Any]":
        return cls(success=False, result=result)


@define(frozen=True, slots=True)
class OperationStatus:
    """Status of a save or delete, with the messages collected along the way."""

    status_type: OperationStatusType
    event_messages: EventMessages
    # The persisted entity for a successful save
    entity: Domain | None = None

    @classmethod
    def success(
        cls, event_messages: EventMessages, entity: Domain | None = None
    ) -> Attempt["OperationStatus"]:
        """Create a succeeded attempt."""
        return Attempt.succeed(
            cls(OperationStatusType.SUCCESS, event_messages, entity)
        )

    @classmethod
    def cancelled(cls, event_messages: EventMessages) -> Attempt["OperationStatus"]:
        """Create a failed attempt for an operation an observer cancelled."""
        return Attempt.fail(
            cls(OperationStatusType.FAILED_CANCELLED_BY_EVENT, event_messages)
        )

"""Event argument types passed to service observers.

Before-events ("saving", "deleting") carry cancellable args: any observer may
set ``cancel`` and every later observer sees the flag. After-events carry the
same types with ``can_cancel=False``.
"""

from attrs import define, field

from hostmap.domain.entities import Domain, EventMessage, EventMessages
from hostmap.domain.exceptions import EventNotCancellableError


@define(slots=True)
class CancellableEventArgs:
    """Mutable decision object folded over the observers of one event."""

    messages: EventMessages = field(factory=EventMessages)
    can_cancel: bool = True
    _cancelled: bool = field(default=False, init=False)

    @property
    def cancel(self) -> bool:
        return self._cancelled

    @cancel.setter
    def cancel(self, value: bool) -> None:
        if not self.can_cancel:
            raise EventNotCancellableError(
                f"{self.__class__.__name__} cannot be cancelled"
            )
        self._cancelled = value

    def cancel_operation(self, message: EventMessage) -> None:
        """Cancel the operation and record why."""
        self.cancel = True
        self.messages.add(message)


@define(slots=True)
class SaveEventArgs(CancellableEventArgs):
    """Args for the saving/saved events."""

    saved_entities: list[Domain] = field(factory=list)


@define(slots=True)
class DeleteEventArgs(CancellableEventArgs):
    """Args for the deleting/deleted events."""

    deleted_entities: list[Domain] = field(factory=list)

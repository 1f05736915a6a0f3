"""Observer registration and synchronous dispatch for service events.

Each service instance owns a ``ServiceEvents`` registry (or receives one), so
subscriptions have the lifetime of the service rather than of the process.
"""

from collections.abc import Callable, Iterator
from typing import Any

from attrs import define, field

from hostmap.config import get_logger
from hostmap.domain.events import CancellableEventArgs, DeleteEventArgs, SaveEventArgs

logger = get_logger(__name__)

# Handlers receive (sender, args)
EventHandler = Callable[[Any, Any], None]


class EventHandlerList[TArgs: CancellableEventArgs]:
    """Ordered observer list for one named event.

    Handlers are called as ``handler(sender, args)`` in registration order on
    the caller's thread. Every handler runs even after one has cancelled, so
    later handlers can inspect ``args.cancel``. Handler exceptions propagate.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register a handler. Returns it, so this also works as a decorator."""
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[EventHandler]:
        return iter(list(self._handlers))

    def raise_event(self, args: TArgs, sender: Any) -> None:
        """Invoke every handler with the same args object."""
        for handler in list(self._handlers):
            handler(sender, args)

    def is_raised_event_cancelled(self, args: TArgs, sender: Any) -> bool:
        """Raise the event and report whether any handler cancelled it."""
        self.raise_event(args, sender)
        if args.cancel:
            logger.debug("Event {event} cancelled by a handler", event=self.name)
        return args.cancel


@define(slots=True)
class ServiceEvents:
    """The before/after events of a CRUD service."""

    saving: EventHandlerList[SaveEventArgs] = field(
        factory=lambda: EventHandlerList("saving")
    )
    saved: EventHandlerList[SaveEventArgs] = field(
        factory=lambda: EventHandlerList("saved")
    )
    deleting: EventHandlerList[DeleteEventArgs] = field(
        factory=lambda: EventHandlerList("deleting")
    )
    deleted: EventHandlerList[DeleteEventArgs] = field(
        factory=lambda: EventHandlerList("deleted")
    )

    def clear(self) -> None:
        """Detach every handler from every event."""
        for handlers in (self.saving, self.saved, self.deleting, self.deleted):
            handlers.clear()

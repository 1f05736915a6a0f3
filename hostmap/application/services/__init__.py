"""Application services coordinating repositories, units of work and events."""

from .domain_service import DomainService
from .events import EventHandler, EventHandlerList, ServiceEvents

__all__ = [
    "DomainService",
    "EventHandler",
    "EventHandlerList",
    "ServiceEvents",
]

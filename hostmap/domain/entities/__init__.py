"""Core domain entities for hostname bindings and operation outcomes."""

from .domain import WILDCARD_PREFIX, Domain
from .operations import (
    Attempt,
    EventMessage,
    EventMessages,
    EventMessageType,
    OperationStatus,
    OperationStatusType,
)

__all__ = [
    "WILDCARD_PREFIX",
    "Attempt",
    "Domain",
    "EventMessage",
    "EventMessageType",
    "EventMessages",
    "OperationStatus",
    "OperationStatusType",
]

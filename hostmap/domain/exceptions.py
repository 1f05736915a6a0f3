"""Domain-level exceptions raised by repositories and event args."""


class HostmapError(Exception):
    """Base class for hostmap errors."""


class DomainNotFoundError(HostmapError, LookupError):
    """Raised when a domain expected to exist is not stored."""

    def __init__(self, identifier: int | str | None) -> None:
        self.identifier = identifier
        super().__init__(f"Domain {identifier!r} not found")


class DuplicateDomainNameError(HostmapError, ValueError):
    """Raised when saving a domain whose name another domain already uses."""

    def __init__(self, domain_name: str) -> None:
        self.domain_name = domain_name
        super().__init__(f"A domain named {domain_name!r} already exists")


class EventNotCancellableError(HostmapError, RuntimeError):
    """Raised when an observer tries to cancel an event that cannot be cancelled."""

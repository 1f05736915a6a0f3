"""Unit tests for DomainService with mocked unit of work and repository.

These verify the orchestration contract: one unit of work per call, one
repository call, an explicit commit, and the before/after event protocol.
"""

from unittest.mock import MagicMock, Mock

import pytest

from hostmap.application.services import DomainService, ServiceEvents
from hostmap.domain.entities import EventMessage, EventMessages, OperationStatusType
from hostmap.domain.exceptions import DuplicateDomainNameError


@pytest.fixture
def uow():
    """Mock unit of work usable as a context manager."""
    uow = MagicMock()
    uow.__enter__.return_value = uow
    uow.__exit__.return_value = None
    return uow


@pytest.fixture
def uow_provider(uow):
    provider = Mock()
    provider.get_unit_of_work.return_value = uow
    return provider


@pytest.fixture
def repo():
    return Mock()


@pytest.fixture
def repository_factory(repo):
    factory = Mock()
    factory.create_domain_repository.return_value = repo
    return factory


@pytest.fixture
def events():
    return ServiceEvents()


@pytest.fixture
def service(uow_provider, repository_factory, events):
    return DomainService(uow_provider, repository_factory, events=events)


class TestQueries:
    """Read operations delegate once and commit."""

    def test_exists(self, service, uow, repo, repository_factory):
        repo.exists.return_value = True

        assert service.exists("example.com") is True
        repository_factory.create_domain_repository.assert_called_once_with(uow)
        repo.exists.assert_called_once_with("example.com")
        uow.commit.assert_called_once()
        uow.__exit__.assert_called_once()

    def test_get_by_name(self, service, uow, repo, domain):
        repo.get_by_name.return_value = domain

        assert service.get_by_name("example.com") is domain
        repo.get_by_name.assert_called_once_with("example.com")
        uow.commit.assert_called_once()

    def test_get_by_name_absent(self, service, repo):
        repo.get_by_name.return_value = None

        assert service.get_by_name("missing.com") is None

    def test_get_by_id(self, service, uow, repo, domain):
        repo.get.return_value = domain

        assert service.get_by_id(7) is domain
        repo.get.assert_called_once_with(7)
        uow.commit.assert_called_once()

    @pytest.mark.parametrize("include_wildcards", [True, False])
    def test_get_all(self, service, uow, repo, domain, include_wildcards):
        repo.get_all.return_value = [domain]

        assert service.get_all(include_wildcards) == [domain]
        repo.get_all.assert_called_once_with(include_wildcards)
        uow.commit.assert_called_once()

    def test_get_assigned_domains(self, service, uow, repo, domain):
        repo.get_assigned_domains.return_value = [domain]

        assert service.get_assigned_domains(1054, False) == [domain]
        repo.get_assigned_domains.assert_called_once_with(1054, False)
        uow.commit.assert_called_once()

    def test_each_call_opens_its_own_unit_of_work(self, service, uow_provider):
        service.exists("a.com")
        service.get_by_name("a.com")

        assert uow_provider.get_unit_of_work.call_count == 2

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.exists(None),
            lambda s: s.get_by_name(None),
            lambda s: s.get_by_id(None),
            lambda s: s.get_assigned_domains(None, True),
            lambda s: s.save(None),
            lambda s: s.delete(None),
        ],
    )
    def test_none_arguments_rejected_before_any_work(self, service, uow_provider, call):
        with pytest.raises(ValueError, match="must not be None"):
            call(service)
        uow_provider.get_unit_of_work.assert_not_called()

    def test_repository_errors_propagate(self, service, uow, repo):
        repo.exists.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            service.exists("example.com")
        uow.commit.assert_not_called()
        exc_type = uow.__exit__.call_args.args[0]
        assert exc_type is RuntimeError


class TestSave:
    """Save runs saving -> persist -> saved."""

    def test_save_success(self, service, uow, repo, events, domain):
        saved = domain.with_id(5)
        repo.add_or_update.return_value = saved
        order = []
        events.saving.subscribe(lambda sender, args: order.append(("saving", args)))
        events.saved.subscribe(lambda sender, args: order.append(("saved", args)))
        repo.add_or_update.side_effect = lambda d: order.append(("write", d)) or saved

        attempt = service.save(domain)

        assert attempt.success is True
        assert attempt.result.status_type is OperationStatusType.SUCCESS
        assert attempt.result.entity == saved
        assert [step for step, _ in order] == ["saving", "write", "saved"]
        saving_args, saved_args = order[0][1], order[2][1]
        assert saving_args.saved_entities == [domain]
        assert saved_args.saved_entities == [saved]
        assert saved_args.can_cancel is False
        assert saving_args.messages is saved_args.messages
        assert attempt.result.event_messages is saving_args.messages
        uow.commit.assert_called_once()

    def test_save_cancelled_opens_no_unit_of_work(
        self, service, uow_provider, repo, events, domain
    ):
        saved_calls = []
        events.saving.subscribe(
            lambda sender, args: args.cancel_operation(
                EventMessage("Policy", "Hostname is reserved")
            )
        )
        events.saved.subscribe(lambda sender, args: saved_calls.append(args))

        attempt = service.save(domain)

        assert attempt.success is False
        assert attempt.result.status_type is OperationStatusType.FAILED_CANCELLED_BY_EVENT
        assert [m.message for m in attempt.result.event_messages] == [
            "Hostname is reserved"
        ]
        uow_provider.get_unit_of_work.assert_not_called()
        repo.add_or_update.assert_not_called()
        assert saved_calls == []

    def test_sender_is_the_service(self, service, repo, events, domain):
        senders = []
        repo.add_or_update.return_value = domain.with_id(1)
        events.saving.subscribe(lambda sender, args: senders.append(sender))

        service.save(domain)

        assert senders == [service]

    def test_messages_come_from_factory(self, uow_provider, repository_factory, repo, domain):
        messages = EventMessages()
        repo.add_or_update.return_value = domain.with_id(1)
        service = DomainService(
            uow_provider, repository_factory, event_messages_factory=lambda: messages
        )

        attempt = service.save(domain)

        assert attempt.result.event_messages is messages

    def test_fresh_messages_per_call(self, service, repo, domain):
        repo.add_or_update.return_value = domain.with_id(1)

        first = service.save(domain)
        second = service.save(domain)

        assert first.result.event_messages is not second.result.event_messages

    def test_save_error_skips_saved_event(self, service, uow, repo, events, domain):
        saved_calls = []
        events.saved.subscribe(lambda sender, args: saved_calls.append(args))
        repo.add_or_update.side_effect = DuplicateDomainNameError("example.com")

        with pytest.raises(DuplicateDomainNameError):
            service.save(domain)
        uow.commit.assert_not_called()
        assert saved_calls == []

    def test_service_owns_registry_by_default(self, uow_provider, repository_factory):
        first = DomainService(uow_provider, repository_factory)
        second = DomainService(uow_provider, repository_factory)

        assert first.events is not second.events


class TestDelete:
    """Delete runs deleting -> remove -> deleted."""

    def test_delete_success(self, service, uow, repo, events, domain):
        stored = domain.with_id(9)
        order = []
        events.deleting.subscribe(lambda sender, args: order.append(("deleting", args)))
        events.deleted.subscribe(lambda sender, args: order.append(("deleted", args)))
        repo.delete.side_effect = lambda d: order.append(("write", d))

        attempt = service.delete(stored)

        assert attempt.success is True
        assert attempt.result.status_type is OperationStatusType.SUCCESS
        assert [step for step, _ in order] == ["deleting", "write", "deleted"]
        assert order[0][1].deleted_entities == [stored]
        assert order[2][1].can_cancel is False
        repo.delete.assert_called_once_with(stored)
        uow.commit.assert_called_once()

    def test_delete_cancelled(self, service, uow_provider, repo, events, domain):
        events.deleting.subscribe(lambda sender, args: setattr(args, "cancel", True))

        attempt = service.delete(domain.with_id(9))

        assert attempt.success is False
        assert attempt.result.status_type is OperationStatusType.FAILED_CANCELLED_BY_EVENT
        uow_provider.get_unit_of_work.assert_not_called()
        repo.delete.assert_not_called()

    def test_observer_error_propagates_before_write(
        self, service, uow_provider, events, domain
    ):
        def broken(sender, args):
            raise RuntimeError("observer failed")

        events.deleting.subscribe(broken)

        with pytest.raises(RuntimeError, match="observer failed"):
            service.delete(domain.with_id(9))
        uow_provider.get_unit_of_work.assert_not_called()

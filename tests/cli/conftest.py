"""CLI fixtures: runner, isolated log file and a database-backed service."""

import sys

from loguru import logger
import pytest
from typer.testing import CliRunner

from hostmap.config import settings
from hostmap.infrastructure.cli import domain_commands


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Send the CLI log file to tmp and restore the default sink afterwards."""
    monkeypatch.setattr(settings.logging, "log_file", tmp_path / "hostmap.log")
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def cli_service(domain_service, monkeypatch):
    """Make every domain command use the in-memory service."""
    monkeypatch.setattr(domain_commands, "get_domain_service", lambda: domain_service)
    return domain_service

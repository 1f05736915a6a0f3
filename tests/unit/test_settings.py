"""Tests for settings loading."""

from pathlib import Path

from hostmap.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # No stray .env

    settings = Settings()

    assert settings.database.url == "sqlite:///data/db/hostmap.db"
    assert settings.database.busy_timeout_ms == 30000
    assert settings.logging.console_level == "INFO"
    assert settings.logging.log_file == Path("data/logs/hostmap.log")


def test_flat_names_map_onto_sections(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    settings = Settings.model_validate(
        {"database_url": "sqlite://", "console_log_level": "DEBUG"}
    )

    assert settings.database.url == "sqlite://"
    assert settings.logging.console_level == "DEBUG"
    assert settings.logging.file_level == "DEBUG"


def test_nested_environment_variables(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE__URL", "sqlite:///other.db")
    monkeypatch.setenv("LOGGING__CONSOLE_LEVEL", "WARNING")

    settings = Settings()

    assert settings.database.url == "sqlite:///other.db"
    assert settings.logging.console_level == "WARNING"

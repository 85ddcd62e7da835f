"""
Tests for environment configuration.
"""

from core import settings


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/drill")
    assert settings.get_database_url() == "postgresql://u:p@host/drill"


def test_database_url_defaults_to_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("TEST_MODE", "false")
    url = settings.get_database_url()
    assert url.startswith("sqlite:///")
    assert url.endswith("drill_state.db")
    assert "test_drill_state" not in url


def test_database_url_in_test_mode(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("TEST_MODE", "true")
    assert settings.is_test_mode() is True
    assert settings.get_database_url().endswith("test_drill_state.db")


def test_persistence_backend(monkeypatch):
    monkeypatch.setenv("PERSISTENCE_BACKEND", "Session")
    assert settings.get_persistence_backend() == "session"
    monkeypatch.setenv("PERSISTENCE_BACKEND", "floppy")
    assert settings.get_persistence_backend() == "database"


def test_mongo_settings_defaults(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost")
    monkeypatch.delenv("MONGO_DB", raising=False)
    monkeypatch.delenv("MONGO_COLLECTION", raising=False)
    assert settings.get_mongo_settings() == ("mongodb://localhost", "drill_trainer", "lexicon")


def test_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert settings.get_log_level() == "DEBUG"

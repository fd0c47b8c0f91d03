"""Tests for configuration."""

import logging

import pytest

from orama_core.config import OramaSettings, get_settings
from orama_core.core.exceptions import ConfigError
from orama_core.core.logging import get_logger, setup_logging
from orama_core.services.client import Client
from orama_core.services.manager import Manager


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Test that settings have correct default values."""
    for name in ("ORAMA_URL", "ORAMA_MASTER_API_KEY", "ORAMA_WRITE_API_KEY", "ORAMA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = OramaSettings(_env_file=None)
    assert settings.url == "http://localhost:8080"
    assert settings.timeout == 30.0
    assert settings.master_api_key is None
    assert settings.log_level == "INFO"


def test_get_settings_returns_singleton():
    """Test that get_settings returns the same instance."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORAMA_URL", "https://orama.example.com")
    monkeypatch.setenv("ORAMA_MASTER_API_KEY", "master-secret")
    monkeypatch.setenv("ORAMA_TIMEOUT", "5")

    settings = OramaSettings(_env_file=None)

    assert settings.url == "https://orama.example.com"
    assert settings.timeout == 5.0
    assert settings.master_api_key is not None
    assert settings.master_api_key.get_secret_value() == "master-secret"
    assert "master-secret" not in repr(settings)


def test_manager_from_settings_requires_master_key():
    settings = OramaSettings(_env_file=None, master_api_key=None)
    with pytest.raises(ConfigError):
        Manager.from_settings(settings)


def test_manager_from_settings():
    settings = OramaSettings(_env_file=None, url="http://orama:8080/", master_api_key="m")
    manager = Manager.from_settings(settings)
    assert manager.url == "http://orama:8080"


def test_client_from_settings_picks_up_keys():
    settings = OramaSettings(
        _env_file=None, url="http://orama:8080", read_api_key="r", write_api_key="w"
    )
    client = Client.from_settings(settings)
    assert client.read_api_key == "r"
    assert client.write_api_key == "w"
    assert client.collection_id is None


def test_client_from_settings_explicit_kwargs_win():
    settings = OramaSettings(_env_file=None, write_api_key="from-env")
    client = Client.from_settings(settings, write_api_key="explicit")
    assert client.write_api_key == "explicit"


def test_setup_logging_uses_explicit_level(monkeypatch: pytest.MonkeyPatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("DEBUG")

    (kwargs,) = calls
    assert kwargs["level"] == "DEBUG"
    assert kwargs["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    assert len(kwargs["handlers"]) == 1


def test_setup_logging_defaults_to_settings_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORAMA_LOG_LEVEL", "WARNING")
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging()

    assert calls[0]["level"] == "WARNING"


def test_get_logger_is_namespaced():
    assert get_logger("orama_core.services.client").name == "orama_core.services.client"

import pytest
from pydantic import ValidationError

from devkit.config import load_settings


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_HOST", "127.0.0.1")
    monkeypatch.setenv("SERVICE_PORT", "9001")
    settings = load_settings("nearest-airport-api")

    assert settings.SERVICE_NAME == "nearest-airport-api"
    assert settings.SERVICE_HOST == "127.0.0.1"
    assert settings.SERVICE_PORT == 9001


def test_load_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SERVICE_HOST", raising=False)
    monkeypatch.delenv("SERVICE_PORT", raising=False)
    settings = load_settings("api")

    assert settings.SERVICE_PORT == 8100
    assert settings.PROBE_PATHS == ("/healthz", "/readyz")


def test_settings_are_frozen() -> None:
    settings = load_settings("api")
    with pytest.raises(ValidationError):
        settings.SERVICE_PORT = 1

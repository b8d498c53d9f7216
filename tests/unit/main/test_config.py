from __future__ import annotations

from src.main.config import AppSettings, get_settings
from src.shared.consts import EnumEnvironment, EnumLogLevel


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DEVICE_NAME", raising=False)
    monkeypatch.delenv("DEVICE_INITIALLY_ON", raising=False)
    settings = get_settings()
    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.device.name == "living-room-light"
    assert settings.device.initially_on is False
    assert settings.service.port == 8080


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_TITLE", "Testing Hub")
    monkeypatch.setenv("SERVICE_PORT", "9090")
    monkeypatch.setenv("DEVICE_NAME", "kitchen")
    monkeypatch.setenv("DEVICE_MAX_PENDING_COMMANDS", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.service.title == "Testing Hub"
    assert settings.service.port == 9090
    assert settings.device.name == "kitchen"
    assert settings.device.max_pending_commands == 5
    assert settings.logging.level is EnumLogLevel.DEBUG


def test_initially_on_accepts_legacy_alias(monkeypatch) -> None:
    monkeypatch.delenv("DEVICE_INITIALLY_ON", raising=False)
    monkeypatch.setenv("LIGHT_INITIALLY_ON", "true")
    assert AppSettings().device.initially_on is True

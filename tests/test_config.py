import logging

import pytest
from pydantic import ValidationError

from random_server.config import Settings, get_settings
from random_server.observability.logging import parse_log_level


def test_defaults() -> None:
    settings = get_settings()

    assert settings.random_error_rate == 0.1
    assert settings.log_level == "error"
    assert settings.log_level_number == logging.ERROR
    assert settings.port == 8080
    assert settings.metrics_enabled is False


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_ERROR_RATE", "0.75")
    monkeypatch.setenv("LOG_LEVEL", "WARN")
    monkeypatch.setenv("METRICS_ENABLED", "true")
    monkeypatch.setenv("METRICS_PORT", "9100")

    settings = get_settings()

    assert settings.random_error_rate == 0.75
    assert settings.log_level == "warn"
    assert settings.log_level_number == logging.WARNING
    assert settings.metrics_enabled is True
    assert settings.metrics_port == 9100


@pytest.mark.parametrize("rate", ["-0.01", "1.5", "abc"])
def test_invalid_error_rate_is_rejected(monkeypatch: pytest.MonkeyPatch, rate: str) -> None:
    monkeypatch.setenv("RANDOM_ERROR_RATE", rate)

    with pytest.raises(ValidationError):
        get_settings()


@pytest.mark.parametrize("rate", [0.0, 1.0])
def test_boundary_error_rates_are_accepted(rate: float) -> None:
    assert Settings(RANDOM_ERROR_RATE=rate).random_error_rate == rate


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        get_settings()


def test_metrics_port_must_differ_when_enabled() -> None:
    with pytest.raises(ValidationError):
        Settings(METRICS_ENABLED=True, PORT=8080, METRICS_PORT=8080)

    assert Settings(METRICS_ENABLED=False, PORT=8080, METRICS_PORT=8080).metrics_port == 8080


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
        ("critical", logging.CRITICAL),
    ],
)
def test_parse_log_level(name: str, level: int) -> None:
    assert parse_log_level(name) == level


def test_parse_log_level_unknown_raises() -> None:
    with pytest.raises(ValueError):
        parse_log_level("loud")

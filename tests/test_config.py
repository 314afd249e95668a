import logging

import pytest

from chronokit import Instant
from chronokit.config import Settings, configure_logging, get_settings, override_settings, reset_settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CHRONOKIT_LOCAL_OFFSET", "UTC+05:30")
    monkeypatch.setenv("CHRONOKIT_BANGLA_VARIANT", "revised-1966")
    monkeypatch.setenv("CHRONOKIT_LOG_LEVEL", "debug")
    reset_settings()

    settings = get_settings()

    assert settings == Settings(local_offset="UTC+05:30", bangla_variant="revised-1966", log_level="DEBUG")


def test_defaults_without_environment(monkeypatch):
    for name in ("CHRONOKIT_LOCAL_OFFSET", "CHRONOKIT_BANGLA_VARIANT", "CHRONOKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.local_offset is None
    assert settings.bangla_variant == "revised-2019"
    assert settings.log_level == "INFO"


def test_invalid_settings_are_rejected():
    with pytest.raises(ValueError):
        Settings(local_offset="+05:30")
    with pytest.raises(ValueError):
        Settings(bangla_variant="gregorian")


def test_local_offset_drives_host_time():
    override_settings(local_offset="UTC-04:00")

    instant = Instant("2025-01-01T12:00:00")

    assert instant.offset == "UTC-04:00"
    assert instant.to_iso_string() == "2025-01-01T16:00:00.000Z"
    assert Instant("2025-01-01T12:00:00Z").to_local().format("HH:mm") == "08:00"


def test_override_merges_with_current_settings():
    override_settings(bangla_variant="revised-1966")

    assert get_settings().local_offset == "UTC+00:00"
    assert get_settings().bangla_variant == "revised-1966"


def test_configure_logging_uses_configured_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    override_settings(log_level="WARNING")

    configure_logging()
    configure_logging("DEBUG")

    assert [call["level"] for call in calls] == ["WARNING", "DEBUG"]

"""Unit tests for environment-driven settings."""

from typing import TYPE_CHECKING

from fspath.bootstrap.config import LoggingSettings, load_logging_settings

if TYPE_CHECKING:
    from _pytest.monkeypatch import MonkeyPatch


def test_load_logging_settings_uses_defaults() -> None:
    """Defaults keep the library quiet and structured."""
    settings = load_logging_settings({})

    assert settings == LoggingSettings("WARNING", "stdout", True)


def test_load_logging_settings_honors_overrides() -> None:
    """Overrides should replace defaults when variables are present."""
    settings = load_logging_settings(
        {
            "FSPATH_LOG_LEVEL": "debug",
            "FSPATH_LOG_DESTINATION": "/var/log/fspath.log",
            "FSPATH_LOG_JSON": "off",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.destination == "/var/log/fspath.log"
    assert settings.use_json is False


def test_load_logging_settings_ignores_unknown_levels() -> None:
    """Unknown levels and blank values fall back to defaults."""
    settings = load_logging_settings(
        {"FSPATH_LOG_LEVEL": "chatty", "FSPATH_LOG_DESTINATION": "  "}
    )

    assert settings.level == "WARNING"
    assert settings.destination == "stdout"


def test_load_logging_settings_reads_process_environment(
    monkeypatch: "MonkeyPatch",
) -> None:
    """Read os.environ when no mapping is given."""
    monkeypatch.setenv("FSPATH_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("FSPATH_LOG_JSON", "yes")

    settings = load_logging_settings()

    assert settings.level == "ERROR"
    assert settings.use_json is True

from __future__ import annotations

import pytest

from textrighter.runtime import telemetry


def test_settings_from_env_reads_prefixed_variables() -> None:
    settings = telemetry.TelemetrySettings.from_env(
        {
            "TEXTRIGHTER_LOG_LEVEL": "debug",
            "TEXTRIGHTER_DISABLE_CONSOLE": "yes",
            "TEXTRIGHTER_LOG_FILE": "editor.log",
            "TEXTRIGHTER_LOG_BUFFER_SIZE": "64",
            "LOG_JSON": "1",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.log_file == "editor.log"
    assert settings.buffer_size == 64
    assert settings.json is False


def test_settings_defaults_with_empty_env() -> None:
    assert telemetry.TelemetrySettings.from_env({}) == telemetry.TelemetrySettings()


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.build_preset("verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_drops_cached_loggers() -> None:
    first = telemetry.get_logger("textrighter.test")
    assert telemetry.get_logger("textrighter.test") is first

    telemetry.configure()

    assert telemetry.get_logger("textrighter.test") is not first


def test_span_reraises_and_records_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component=True, metadata={"n": 1}) as handle:
            handle.add_metadata("stage", "inside")
            assert handle.metadata == {"n": "1", "stage": "inside"}
            assert handle.component_name == "test::span"
            raise RuntimeError("boom")

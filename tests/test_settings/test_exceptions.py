"""Тесты исключений подсистемы настроек."""

from __future__ import annotations

import pytest

from runlike.settings.exceptions import SettingsError, SettingsNotFoundError, SettingsValidationError


class TestSettingsNotFoundError:
    """Сообщение для отсутствующих ключей."""

    def test_error_message_and_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = SettingsNotFoundError("docker", "hostname")
        assert str(error) == "Setting 'docker.hostname' not found"
        assert "docker.hostname" in caplog.text

    def test_group_only(self) -> None:
        assert str(SettingsNotFoundError("proxy")) == "Setting 'proxy' not found"


class TestSettingsValidationError:
    """Ошибки значений из окружения."""

    def test_contains_reason_value_and_source(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = SettingsValidationError(
            "docker.timeout", "soon", "Expected an integer", source="RUNLIKE_TIMEOUT"
        )
        assert isinstance(error, SettingsError)
        assert error.key == "docker.timeout"
        assert error.source == "RUNLIKE_TIMEOUT"
        assert "$RUNLIKE_TIMEOUT" in str(error)
        assert "soon" in caplog.text
        assert error.context["reason"] == "Expected an integer"

    def test_without_source(self) -> None:
        error = SettingsValidationError("logging.level", "LOUD", "unknown level")
        assert str(error) == "Invalid value for 'logging.level': unknown level (value='LOUD')"

"""Исключения подсистемы настроек (ошибки конфигурации окружения)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовая ошибка настроек, хранит контекст и сразу пишет его в лог."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class SettingsNotFoundError(SettingsError):
    """Запрошена несуществующая группа или ключ."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Значение из окружения не прошло проверку."""

    def __init__(self, key: str, value: Any, reason: str, *, source: Optional[str] = None) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        self.source = source
        origin = f" from ${source}" if source else ""
        super().__init__(
            f"Invalid value for '{key}'{origin}: {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason, "source": source},
        )

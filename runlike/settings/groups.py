"""Группы настроек: параметры клиента Docker и логирования.

Каждая группа знает значения по умолчанию, проверки и имена переменных
окружения, из которых заполняются её ключи. Строки из окружения приводятся
к типу значения по умолчанию (int или str) до проверки.

Адрес daemon и TLS (DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH)
здесь не хранятся: их читает сам docker-py в ``docker.from_env``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from runlike.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from runlike.settings.validators import ApiVersion, BoundedInt, OneOf, Validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsGroup(ABC):
    """Абстрактная база для групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._env_vars: Dict[str, str] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self._setup_env_vars()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает проверки к ключам."""

    @abstractmethod
    def _setup_env_vars(self) -> None:
        """Связывает ключи с переменными окружения."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str) -> Any:
        """Возвращает текущее значение ключа."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values[key]

    def check(self, key: str, value: Any) -> Optional[str]:
        """Причина, по которой значение не подходит ключу, или None."""

        validator = self._validators.get(key)
        if validator is None:
            return None
        return validator.check(value)

    def set(self, key: str, value: Any, *, source: str | None = None) -> None:
        """Сохраняет значение, выбрасывая SettingsValidationError при ошибке."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        error = self.check(key, value)
        if error:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
                source=source,
            )
        self._values[key] = value

    def env_var(self, key: str) -> str | None:
        """Имя переменной окружения для ключа (None, если ключ не читается из окружения)."""

        return self._env_vars.get(key)

    def load_environ(self, environ: Mapping[str, str]) -> None:
        """Заполняет группу из окружения; отсутствующие и пустые переменные игнорируются."""

        for key, variable in self._env_vars.items():
            raw = environ.get(variable)
            if raw is None or raw.strip() == "":
                continue
            self.set(key, self._coerce(key, raw.strip(), variable), source=variable)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)

    def _coerce(self, key: str, raw: str, variable: str) -> Any:
        if isinstance(self._defaults[key], int):
            try:
                return int(raw)
            except ValueError:
                raise SettingsValidationError(
                    key=f"{self.group_name}.{key}",
                    value=raw,
                    reason="Expected an integer",
                    source=variable,
                ) from None
        return raw


class DockerSettings(SettingsGroup):
    """Параметры docker client: версия API и таймаут запросов."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "api_version": "auto",
            "timeout": 60,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "api_version": ApiVersion(),
            "timeout": BoundedInt(1, 600),
        }

    def _setup_env_vars(self) -> None:
        self._env_vars = {
            "api_version": "DOCKER_API_VERSION",
            "timeout": "RUNLIKE_TIMEOUT",
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "level": "WARNING",
            "log_file": "",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "level": OneOf(LOG_LEVELS),
            "max_file_size_mb": BoundedInt(1, 1000),
            "max_archived_files": BoundedInt(1, 50),
        }

    def _setup_env_vars(self) -> None:
        self._env_vars = {
            "level": "RUNLIKE_LOG_LEVEL",
            "log_file": "RUNLIKE_LOG_FILE",
        }

    def _coerce(self, key: str, raw: str, variable: str) -> Any:
        if key == "level":
            return raw.upper()
        return super()._coerce(key, raw, variable)

"""Реестр групп настроек, собираемый из переменных окружения."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from runlike.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from runlike.settings.groups import DockerSettings, LoggingSettings, SettingsGroup


class SettingsRegistry:
    """Хранит все группы настроек одного запуска."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._settings: Dict[str, SettingsGroup] = {
            "docker": DockerSettings(),
            "logging": LoggingSettings(),
        }

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "SettingsRegistry":
        """Создаёт реестр и заполняет его значениями из окружения."""

        registry = cls()
        registry.load_environ(environ)
        return registry

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    @property
    def docker_settings(self) -> DockerSettings:
        group = self.get_group("docker")
        assert isinstance(group, DockerSettings)
        return group

    @property
    def logging_settings(self) -> LoggingSettings:
        group = self.get_group("logging")
        assert isinstance(group, LoggingSettings)
        return group

    def load_environ(self, environ: Mapping[str, str]) -> None:
        for group in self._settings.values():
            group.load_environ(environ)
        self.validate()
        self._logger.debug("Settings loaded from environment: %s", self.to_dict())

    def validate(self) -> bool:
        for name, group in self._settings.items():
            for key in group.keys():
                value = group.get(key)
                error = group.check(key, value)
                if error:
                    raise SettingsValidationError(
                        key=f"{name}.{key}",
                        value=value,
                        reason=error,
                        source=group.env_var(key),
                    )
        return True

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: group.to_dict() for name, group in self._settings.items()}

"""Получение дескриптора контейнера: один клиент, один запрос inspect.

Класс объединяет настройки подключения из `SettingsRegistry` и функции
`runlike.docker_api.containers`. Повторов нет: утилита одноразовая, любая
ошибка поднимается наверх как `DockerAPIError`.
"""

from __future__ import annotations

import logging

from runlike.docker_api import containers
from runlike.docker_api.client import DockerClientWrapper
from runlike.docker_api.models import ContainerDescriptor
from runlike.settings.registry import SettingsRegistry

LOGGER = logging.getLogger(__name__)


class DockerDataProvider:
    """Предоставляет утилите единственную операцию: inspect контейнера."""

    def __init__(self, settings: SettingsRegistry) -> None:
        self._settings = settings

    def _create_client(self) -> DockerClientWrapper:
        """Создаёт Docker client по настройкам окружения."""

        return DockerClientWrapper(self._settings.docker_settings)

    def fetch_descriptor(self, identifier: str) -> ContainerDescriptor:
        """Возвращает дескриптор контейнера по имени или ID."""

        if not identifier:
            raise ValueError("Container identifier must not be empty")

        LOGGER.debug("Inspecting container %s", identifier)
        with self._create_client() as client:
            return containers.inspect_container(client, identifier)

"""Обёртка над docker-py с безопасной инициализацией."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

import docker
from docker.errors import DockerException

from runlike.docker_api.exceptions import DockerConnectionError
from runlike.settings.groups import DockerSettings

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Создаёт docker client из окружения (DOCKER_HOST, TLS) и закрывает его."""

    def __init__(
        self,
        settings: DockerSettings,
        raw_client: Any | None = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.settings = settings  # версия API и таймаут
        self._environ = os.environ if environ is None else environ
        self._client = raw_client or self._create_client()

    @property
    def endpoint(self) -> str:
        """Адрес daemon для сообщений об ошибках."""

        return self._environ.get("DOCKER_HOST") or "default socket"

    def _create_client(self) -> Any:
        version = self.settings.get("api_version")
        LOGGER.debug("Creating Docker client for %s (api=%s)", self.endpoint, version)
        try:
            # "auto" включает согласование версии API с daemon
            return docker.from_env(
                version=version,
                timeout=self.settings.get("timeout"),
                environment=dict(self._environ),
            )
        except DockerException as exc:
            LOGGER.error("Docker client init error via %s: %s", self.endpoint, exc)
            raise DockerConnectionError(
                f"Cannot connect to Docker daemon at {self.endpoint}: {exc}",
                context={"host": self.endpoint},
            ) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    def close(self) -> None:
        """Закрывает HTTP-сессию клиента."""

        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "DockerClientWrapper":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

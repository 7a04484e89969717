"""Ошибки обращения к Docker daemon."""

from __future__ import annotations

from typing import Any, Dict, Optional


class DockerAPIError(Exception):
    """Базовая ошибка получения данных от Docker."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class DockerConnectionError(DockerAPIError):
    """Клиент не создан или daemon недоступен."""


class ContainerNotFoundError(DockerAPIError):
    """Идентификатор не соответствует ни одному контейнеру."""

    def __init__(self, identifier: str, reason: str = "") -> None:
        self.identifier = identifier
        message = f"No such container: {identifier}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, context={"identifier": identifier})

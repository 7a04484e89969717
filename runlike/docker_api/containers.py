"""Чтение конфигурации контейнера через Docker client."""

from __future__ import annotations

import logging
from typing import Any, Dict

from docker.errors import DockerException, NotFound
from requests.exceptions import RequestException

from runlike.docker_api.client import DockerClientWrapper
from runlike.docker_api.exceptions import (
    ContainerNotFoundError,
    DockerAPIError,
    DockerConnectionError,
)
from runlike.docker_api.models import ContainerDescriptor

LOGGER = logging.getLogger(__name__)


def fetch_inspect_attrs(client: DockerClientWrapper, identifier: str) -> Dict[str, Any]:
    """Возвращает сырой ответ inspect для контейнера."""

    raw = client.get_raw_client()
    try:
        container = raw.containers.get(identifier)
    except NotFound as exc:
        LOGGER.error("Container %s not found: %s", identifier, exc)
        raise ContainerNotFoundError(identifier, str(exc)) from exc
    except DockerException as exc:
        LOGGER.error("Cannot inspect %s: %s", identifier, exc)
        raise DockerAPIError(str(exc), context={"identifier": identifier}) from exc
    except RequestException as exc:
        # обрыв соединения или таймаут чтения: daemon не ответил
        LOGGER.error("Docker daemon at %s is unreachable: %s", client.endpoint, exc)
        raise DockerConnectionError(
            f"Cannot connect to Docker daemon at {client.endpoint}: {exc}",
            context={"host": client.endpoint},
        ) from exc
    return getattr(container, "attrs", None) or {}


def inspect_container(client: DockerClientWrapper, identifier: str) -> ContainerDescriptor:
    """Выполняет inspect и упаковывает результат в ContainerDescriptor."""

    attrs = fetch_inspect_attrs(client, identifier)
    descriptor = ContainerDescriptor.from_inspect(attrs)
    LOGGER.debug("Inspected %s (image=%s)", descriptor.name or identifier, descriptor.image)
    return descriptor

"""Общие фикстуры тестов."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator

import pytest

from runlike.utils.logger import LOG_FORMAT


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Снимает обработчики, добавленные configure_logging, и возвращает уровень."""

    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        formatter = handler.formatter
        if formatter is not None and formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def inspect_attrs() -> Dict[str, Any]:
    """Ответ docker inspect с заполненными полями."""

    return {
        "Id": "4f1c2d",
        "Name": "/web1",
        "Config": {
            "Tty": True,
            "User": "www-data",
            "Env": ["A=1", "B=2", "A=1"],
            "WorkingDir": "/srv",
            "Image": "nginx:latest",
            "Cmd": ["nginx", "-g", "daemon off;"],
        },
        "HostConfig": {
            "Links": ["/db:/web1/db"],
            "CpusetCpus": "0-1",
            "CpusetMems": "0",
            "Devices": [
                {"PathOnHost": "/dev/sda", "PathInContainer": "/dev/xvda", "CgroupPermissions": "rwm"},
                {"PathOnHost": "/dev/fuse", "PathInContainer": "/dev/fuse", "CgroupPermissions": ""},
            ],
            "Memory": 536870912,
            "MemoryReservation": 268435456,
            "Privileged": True,
            "AutoRemove": True,
            "PortBindings": {
                "443/tcp": [{"HostIp": "", "HostPort": "8443"}],
                "80/tcp": [
                    {"HostIp": "0.0.0.0", "HostPort": "8080"},
                    {"HostIp": "127.0.0.1", "HostPort": "9090"},
                ],
            },
            "NetworkMode": "backend",
            "RestartPolicy": {"Name": "always", "MaximumRetryCount": 0},
            "Dns": ["8.8.8.8", "1.1.1.1"],
            "DnsSearch": ["example.com"],
            "ExtraHosts": ["db.local:10.0.0.5"],
        },
        "NetworkSettings": {"MacAddress": "02:42:ac:11:00:02"},
        "Mounts": [
            {"Type": "bind", "Source": "/data", "Destination": "/var/lib/data"},
            {"Type": "volume", "Source": "/var/lib/docker/volumes/v/_data", "Destination": "/cache"},
        ],
    }

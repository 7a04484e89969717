"""Тесты построения ContainerDescriptor из ответа inspect."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import Any, Dict

import pytest

from runlike.docker_api.models import ContainerDescriptor, DeviceMapping, MountPoint, PortBinding


def test_from_inspect_reads_all_fields(inspect_attrs: Dict[str, Any]) -> None:
    descriptor = ContainerDescriptor.from_inspect(inspect_attrs)
    assert descriptor.name == "/web1"
    assert descriptor.mac_address == "02:42:ac:11:00:02"
    assert descriptor.links == ("/db:/web1/db",)
    assert descriptor.devices[0] == DeviceMapping("/dev/sda", "/dev/xvda", "rwm")
    assert descriptor.memory == 536870912
    assert descriptor.memory_reservation == 268435456
    assert descriptor.privileged and descriptor.tty and descriptor.auto_remove
    assert descriptor.env == ("A=1", "B=2", "A=1")
    assert descriptor.port_bindings["80/tcp"] == (
        PortBinding("0.0.0.0", "8080"),
        PortBinding("127.0.0.1", "9090"),
    )
    assert descriptor.mounts[0] == MountPoint("/data", "/var/lib/data")
    assert descriptor.restart_policy == "always"
    assert descriptor.dns_search == ("example.com",)
    assert descriptor.cmd == ("nginx", "-g", "daemon off;")


def test_nulls_and_missing_sections_use_defaults() -> None:
    attrs = {
        "Name": "/idle",
        "Config": {"Env": None, "Cmd": None, "Image": "alpine"},
        "HostConfig": {
            "PortBindings": None,
            "Devices": None,
            "Dns": None,
            "Memory": None,
            "RestartPolicy": None,
        },
        "NetworkSettings": None,
        "Mounts": None,
    }
    descriptor = ContainerDescriptor.from_inspect(attrs)
    assert descriptor == ContainerDescriptor(name="/idle", image="alpine")


def test_empty_payload() -> None:
    assert ContainerDescriptor.from_inspect({}) == ContainerDescriptor()


def test_port_with_null_bindings_keeps_key() -> None:
    attrs = {"HostConfig": {"PortBindings": {"80/tcp": None}}}
    descriptor = ContainerDescriptor.from_inspect(attrs)
    assert dict(descriptor.port_bindings) == {"80/tcp": ()}


def test_string_cmd_is_single_argument() -> None:
    attrs = {"Config": {"Cmd": "/bin/sh -c true"}}
    assert ContainerDescriptor.from_inspect(attrs).cmd == ("/bin/sh -c true",)


def test_descriptor_is_read_only(inspect_attrs: Dict[str, Any]) -> None:
    descriptor = ContainerDescriptor.from_inspect(inspect_attrs)
    with pytest.raises(FrozenInstanceError):
        descriptor.name = "/other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        descriptor.port_bindings["22/tcp"] = ()  # type: ignore[index]


def test_source_payload_is_not_shared(inspect_attrs: Dict[str, Any]) -> None:
    descriptor = ContainerDescriptor.from_inspect(inspect_attrs)
    inspect_attrs["Config"]["Env"].append("C=3")
    assert descriptor.env == ("A=1", "B=2", "A=1")


def test_direct_port_bindings_are_copied_and_frozen() -> None:
    bindings = {"80/tcp": (PortBinding("", "8080"),)}
    descriptor = ContainerDescriptor(port_bindings=bindings)
    bindings["443/tcp"] = (PortBinding("", "8443"),)
    assert list(descriptor.port_bindings) == ["80/tcp"]
    with pytest.raises(TypeError):
        descriptor.port_bindings["22/tcp"] = ()  # type: ignore[index]

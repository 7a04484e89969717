"""Неизменяемый снимок конфигурации контейнера (результат docker inspect).

Из полного ответа inspect берутся только поля, которые участвуют в
восстановлении команды ``docker run``. ``null`` на любом уровне трактуется
как отсутствующий ключ и заменяется значением по умолчанию.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class DeviceMapping:
    """Проброшенное устройство (--device)."""

    path_on_host: str
    path_in_container: str
    cgroup_permissions: str = ""


@dataclass(frozen=True, slots=True)
class PortBinding:
    """Привязка порта контейнера к адресу хоста."""

    host_ip: str = ""
    host_port: str = ""


@dataclass(frozen=True, slots=True)
class MountPoint:
    """Точка монтирования: путь на хосте и путь в контейнере."""

    source: str
    destination: str


@dataclass(frozen=True, slots=True)
class ContainerDescriptor:
    """Конфигурация контейнера, нужная для сборки команды запуска."""

    name: str = ""
    mac_address: str = ""
    links: Tuple[str, ...] = ()
    cpuset_cpus: str = ""
    cpuset_mems: str = ""
    devices: Tuple[DeviceMapping, ...] = ()
    memory: int = 0
    memory_reservation: int = 0
    privileged: bool = False
    tty: bool = False
    auto_remove: bool = False
    user: str = ""
    env: Tuple[str, ...] = ()
    port_bindings: Mapping[str, Tuple[PortBinding, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    network_mode: str = ""
    mounts: Tuple[MountPoint, ...] = ()
    working_dir: str = ""
    restart_policy: str = ""
    dns: Tuple[str, ...] = ()
    dns_search: Tuple[str, ...] = ()
    extra_hosts: Tuple[str, ...] = ()
    image: str = ""
    cmd: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # словарь вызывающего копируется, чтобы его изменения не попали в дескриптор
        if not isinstance(self.port_bindings, MappingProxyType):
            object.__setattr__(self, "port_bindings", MappingProxyType(dict(self.port_bindings)))

    @classmethod
    def from_inspect(cls, attrs: Mapping[str, Any]) -> "ContainerDescriptor":
        """Строит дескриптор из словаря ``container.attrs``."""

        config = _section(attrs, "Config")
        host_config = _section(attrs, "HostConfig")
        network = _section(attrs, "NetworkSettings")
        restart = _section(host_config, "RestartPolicy")

        return cls(
            name=_text(attrs, "Name"),
            mac_address=_text(network, "MacAddress"),
            links=_strings(host_config, "Links"),
            cpuset_cpus=_text(host_config, "CpusetCpus"),
            cpuset_mems=_text(host_config, "CpusetMems"),
            devices=tuple(_device(entry) for entry in _entries(host_config, "Devices")),
            memory=_number(host_config, "Memory"),
            memory_reservation=_number(host_config, "MemoryReservation"),
            privileged=bool(host_config.get("Privileged")),
            tty=bool(config.get("Tty")),
            auto_remove=bool(host_config.get("AutoRemove")),
            user=_text(config, "User"),
            env=_strings(config, "Env"),
            port_bindings=_port_bindings(host_config.get("PortBindings")),
            network_mode=_text(host_config, "NetworkMode"),
            mounts=tuple(_mount(entry) for entry in _entries(attrs, "Mounts")),
            working_dir=_text(config, "WorkingDir"),
            restart_policy=_text(restart, "Name"),
            dns=_strings(host_config, "Dns"),
            dns_search=_strings(host_config, "DnsSearch"),
            extra_hosts=_strings(host_config, "ExtraHosts"),
            image=_text(config, "Image"),
            cmd=_strings(config, "Cmd"),
        )


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _number(data: Mapping[str, Any], key: str) -> int:
    try:
        return int(data.get(key) or 0)
    except (TypeError, ValueError):
        return 0


def _strings(data: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        # Cmd в старых API встречается строкой, а не списком
        return (value,)
    return tuple(str(item) for item in value)


def _entries(data: Mapping[str, Any], key: str) -> Iterable[Mapping[str, Any]]:
    value = data.get(key) or []
    return [entry for entry in value if isinstance(entry, Mapping)]


def _device(entry: Mapping[str, Any]) -> DeviceMapping:
    return DeviceMapping(
        path_on_host=_text(entry, "PathOnHost"),
        path_in_container=_text(entry, "PathInContainer"),
        cgroup_permissions=_text(entry, "CgroupPermissions"),
    )


def _mount(entry: Mapping[str, Any]) -> MountPoint:
    return MountPoint(source=_text(entry, "Source"), destination=_text(entry, "Destination"))


def _port_bindings(raw: Any) -> Mapping[str, Tuple[PortBinding, ...]]:
    bindings: Dict[str, Tuple[PortBinding, ...]] = {}
    if not isinstance(raw, Mapping):
        return MappingProxyType(bindings)
    for container_port, host_bindings in raw.items():
        bindings[str(container_port)] = tuple(
            PortBinding(host_ip=_text(binding, "HostIp"), host_port=_text(binding, "HostPort"))
            for binding in (host_bindings or [])
            if isinstance(binding, Mapping)
        )
    return MappingProxyType(bindings)

"""Сборка команды ``docker run`` из дескриптора контейнера.

Порядок флагов задаётся таблицей `RUN_FLAG_RULES`: каждое правило читает
одно поле дескриптора и возвращает ноль или больше токенов. Токены
собираются в список и соединяются один раз; после каждого токена ставится
ровно один пробел, поэтому строка заканчивается пробелом (так выглядел
вывод прежних версий утилиты).

Порты выводятся отсортированными по номеру порта контейнера, затем по
протоколу. Аргументы команды склеиваются через пробел без кавычек.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from runlike.docker_api.models import ContainerDescriptor
from runlike.utils.helpers import strip_container_name

COMMAND_PREFIX = "docker run"

Renderer = Callable[[ContainerDescriptor], List[str]]


@dataclass(frozen=True, slots=True)
class FlagRule:
    """Правило преобразования одного поля дескриптора в токены."""

    name: str
    render: Renderer


def _optional(field_name: str, flag: str) -> FlagRule:
    """``flag value``, если строковое поле непустое."""

    def render(descriptor: ContainerDescriptor) -> List[str]:
        value = getattr(descriptor, field_name)
        return [f"{flag} {value}"] if value else []

    return FlagRule(field_name, render)


def _positive(field_name: str, flag: str) -> FlagRule:
    """``flag value``, если числовое поле больше нуля."""

    def render(descriptor: ContainerDescriptor) -> List[str]:
        value = getattr(descriptor, field_name)
        return [f"{flag} {value}"] if value > 0 else []

    return FlagRule(field_name, render)


def _switch(field_name: str, flag: str) -> FlagRule:
    """Флаг без значения, если поле истинно."""

    def render(descriptor: ContainerDescriptor) -> List[str]:
        return [flag] if getattr(descriptor, field_name) else []

    return FlagRule(field_name, render)


def _repeated(field_name: str, flag: str) -> FlagRule:
    """По одному ``flag value`` на каждый элемент списка, в исходном порядке."""

    def render(descriptor: ContainerDescriptor) -> List[str]:
        return [f"{flag} {item}" for item in getattr(descriptor, field_name)]

    return FlagRule(field_name, render)


def _render_name(descriptor: ContainerDescriptor) -> List[str]:
    return [f"--name {strip_container_name(descriptor.name)}"]


def _render_devices(descriptor: ContainerDescriptor) -> List[str]:
    tokens = []
    for device in descriptor.devices:
        mapping = f"{device.path_on_host}:{device.path_in_container}"
        if device.cgroup_permissions:
            mapping = f"{mapping}:{device.cgroup_permissions}"
        tokens.append(f"--device {mapping}")
    return tokens


def _render_env(descriptor: ContainerDescriptor) -> List[str]:
    # значение не экранируется: кавычки внутри переменной попадут в вывод как есть
    return [f'-e "{entry}"' for entry in descriptor.env]


def port_sort_key(container_port: str) -> Tuple[int, int, str, str]:
    """Ключ сортировки вида ``80/tcp``: сначала числовые порты по возрастанию."""

    port, _, protocol = container_port.partition("/")
    if port.isdigit():
        return 0, int(port), protocol, container_port
    return 1, 0, protocol, container_port


def _render_ports(descriptor: ContainerDescriptor) -> List[str]:
    tokens = []
    for container_port in sorted(descriptor.port_bindings, key=port_sort_key):
        for binding in descriptor.port_bindings[container_port]:
            tokens.append(f"-p {binding.host_ip}:{binding.host_port}:{container_port}")
    return tokens


def _render_mounts(descriptor: ContainerDescriptor) -> List[str]:
    return [f"-v {mount.source}:{mount.destination}" for mount in descriptor.mounts]


def _render_cmd(descriptor: ContainerDescriptor) -> List[str]:
    # TODO: quote each argument with shlex.quote once consumers stop relying on the joined form
    return [" ".join(descriptor.cmd)] if descriptor.cmd else []


RUN_FLAG_RULES: Tuple[FlagRule, ...] = (
    FlagRule("name", _render_name),
    _optional("mac_address", "--mac-address"),
    _repeated("links", "--link"),
    _optional("cpuset_cpus", "--cpuset-cpus"),
    _optional("cpuset_mems", "--cpuset-mems"),
    FlagRule("devices", _render_devices),
    _positive("memory", "--memory"),
    _positive("memory_reservation", "--memory-reservation"),
    _switch("privileged", "--privileged"),
    # запущенный контейнер всегда восстанавливается в фоновом режиме
    FlagRule("detach", lambda descriptor: ["-d"]),
    _switch("tty", "-t"),
    _switch("auto_remove", "--rm"),
    _optional("user", "--user"),
    FlagRule("env", _render_env),
    FlagRule("port_bindings", _render_ports),
    _optional("network_mode", "--network"),
    FlagRule("mounts", _render_mounts),
    _optional("working_dir", "-w"),
    _optional("restart_policy", "--restart"),
    _repeated("dns", "--dns"),
    _repeated("dns_search", "--dns-search"),
    _repeated("extra_hosts", "--add-host"),
    FlagRule("image", lambda descriptor: [descriptor.image]),
    FlagRule("cmd", _render_cmd),
)


def render_rule(rule_name: str, descriptor: ContainerDescriptor) -> List[str]:
    """Токены одного правила по его имени."""

    for rule in RUN_FLAG_RULES:
        if rule.name == rule_name:
            return rule.render(descriptor)
    raise KeyError(f"Unknown flag rule: {rule_name}")


def build_tokens(
    descriptor: ContainerDescriptor, rules: Sequence[FlagRule] = RUN_FLAG_RULES
) -> List[str]:
    """Проходит правила по порядку и собирает все токены."""

    tokens: List[str] = []
    for rule in rules:
        tokens.extend(rule.render(descriptor))
    return tokens


def format_run_command(descriptor: ContainerDescriptor) -> str:
    """Возвращает команду ``docker run``, воссоздающую контейнер."""

    tokens = [COMMAND_PREFIX, *build_tokens(descriptor)]
    return "".join(f"{token} " for token in tokens)

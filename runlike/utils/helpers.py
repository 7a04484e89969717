"""Различные вспомогательные функции."""

from __future__ import annotations


_NAME_SEPARATOR = "/"


def strip_container_name(name: str) -> str:
    """Убирает ведущий '/', который daemon добавляет к сохранённому имени контейнера."""

    if name.startswith(_NAME_SEPARATOR):
        return name[len(_NAME_SEPARATOR):]
    return name

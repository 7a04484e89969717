"""Проверки значений, приходящих из переменных окружения.

Каждая проверка возвращает текст ошибки или None, если значение подходит.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple


class Validator(ABC):
    """Проверка одного значения настройки."""

    @abstractmethod
    def check(self, value: Any) -> Optional[str]:
        """Возвращает причину отказа или None."""


class BoundedInt(Validator):
    """Целое число в пределах [low, high]; bool числом не считается."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high

    def check(self, value: Any) -> Optional[str]:
        if isinstance(value, bool) or not isinstance(value, int):
            return f"Expected an integer, got {type(value).__name__}"
        if not self.low <= value <= self.high:
            return f"Must be between {self.low} and {self.high}"
        return None


class OneOf(Validator):
    """Значение из фиксированного набора (уровни логирования)."""

    def __init__(self, choices: Iterable[str]) -> None:
        self.choices: Tuple[str, ...] = tuple(choices)

    def check(self, value: Any) -> Optional[str]:
        if value in self.choices:
            return None
        return f"Expected one of {', '.join(self.choices)}"


class ApiVersion(Validator):
    """Версия Docker API: ``auto`` или ``<major>.<minor>``."""

    PATTERN = re.compile(r"auto|\d+\.\d+")

    def check(self, value: Any) -> Optional[str]:
        if isinstance(value, str) and self.PATTERN.fullmatch(value):
            return None
        return "Expected 'auto' or a version like 1.43"

"""Восстановление команды ``docker run`` по запущенному контейнеру."""

__version__ = "1.0.0"

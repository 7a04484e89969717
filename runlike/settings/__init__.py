"""Настройки утилиты, считываемые из переменных окружения."""

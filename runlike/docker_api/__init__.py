"""Доступ к Docker daemon: клиент, inspect и модели дескриптора."""

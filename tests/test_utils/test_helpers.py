"""Тесты вспомогательных функций."""

from __future__ import annotations

from runlike.utils.helpers import strip_container_name


def test_strip_container_name() -> None:
    assert strip_container_name("/web1") == "web1"
    assert strip_container_name("web1") == "web1"
    assert strip_container_name("//odd") == "/odd"
    assert strip_container_name("") == ""

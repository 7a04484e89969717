"""Точка входа: ``runlike -c <контейнер>`` печатает команду docker run."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from runlike import __version__
from runlike.docker_api.data_provider import DockerDataProvider
from runlike.docker_api.exceptions import DockerAPIError
from runlike.formatter import format_run_command
from runlike.settings.exceptions import SettingsError
from runlike.settings.registry import SettingsRegistry
from runlike.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runlike",
        description="Print the docker run command that recreates a running container.",
    )
    parser.add_argument(
        "-c",
        dest="container",
        default="",
        metavar="string",
        help="name or id of the container",
    )
    return parser


def setup_logging_from_settings(settings: SettingsRegistry) -> None:
    """Перенастраивает логирование по группе logging."""

    logging_settings = settings.logging_settings
    log_file = logging_settings.get("log_file")
    configure_logging(
        Path(log_file).expanduser() if log_file else None,
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, запрашивает inspect и печатает команду."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.container:
        parser.print_help(sys.stderr)
        return 0

    configure_logging()
    try:
        settings = SettingsRegistry.from_environ(os.environ)
    except SettingsError as exc:
        LOGGER.critical("Invalid Docker environment configuration: %s", exc)
        return 1
    setup_logging_from_settings(settings)
    LOGGER.debug("runlike %s inspecting %s", __version__, args.container)

    provider = DockerDataProvider(settings)
    try:
        descriptor = provider.fetch_descriptor(args.container)
    except DockerAPIError as exc:
        LOGGER.critical("Failed to inspect container %s: %s", args.container, exc)
        return 1

    print(format_run_command(descriptor))
    return 0


if __name__ == "__main__":
    sys.exit(main())

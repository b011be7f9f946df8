# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from macfmt.config.log_config import LoggerConfigurator


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in LoggerConfigurator._installed:
        root.removeHandler(handler)
        handler.close()
    LoggerConfigurator._installed = []
    root.setLevel(level)


def test_console_only_by_default() -> None:
    LoggerConfigurator(level="info")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(LoggerConfigurator._installed) == 1
    assert isinstance(LoggerConfigurator._installed[0], logging.StreamHandler)
    assert LoggerConfigurator._installed[0] in root.handlers


def test_unknown_level_falls_back_to_warning() -> None:
    LoggerConfigurator(level="chatty")
    assert logging.getLogger().level == logging.WARNING


def test_file_logging_writes_to_log_dir(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    LoggerConfigurator(level="DEBUG", log_dir=log_dir, log_filename="run.log", to_console=False)

    logging.getLogger("macfmt.test").info("hello file")
    for handler in LoggerConfigurator._installed:
        handler.flush()

    content = (log_dir / "run.log").read_text(encoding="utf-8")
    assert "[INFO] macfmt.test: hello file" in content


def test_rotate_uses_rotating_handler(tmp_path: Path) -> None:
    LoggerConfigurator(level="INFO", log_dir=tmp_path, rotate=True, to_console=False)
    assert isinstance(LoggerConfigurator._installed[0], RotatingFileHandler)


def test_reconfigure_replaces_previous_handlers() -> None:
    LoggerConfigurator(level="INFO")
    first = list(LoggerConfigurator._installed)

    LoggerConfigurator(level="DEBUG")

    root = logging.getLogger()
    assert all(handler not in root.handlers for handler in first)
    assert len(LoggerConfigurator._installed) == 1

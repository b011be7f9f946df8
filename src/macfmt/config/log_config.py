# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from macfmt.lib.types import FileNameStr, PathLike


class LoggerConfigurator:
    """
    Configure application logging to stderr (and optionally a file),
    with optional rotation.

    Only handlers installed by a previous LoggerConfigurator are replaced,
    so configuring twice in one process does not duplicate output.
    """

    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    _installed: list[logging.Handler] = []

    def __init__(self,
                 level: str = 'WARNING',
                 log_dir: PathLike | None = None,
                 log_filename: FileNameStr | None = None,
                 to_console: bool = True, rotate: bool = False
    ) -> None:
        """
        Initialize the LoggerConfigurator.

        Args:
            level (str): Logging level name ('DEBUG', 'INFO', etc.). Unknown names fall back to WARNING.
            log_dir (str | None): Directory for the log file. Created if missing. None disables file logging.
            log_filename (str | None): Name of the log file (e.g. 'macfmt.log').
            to_console (bool): If True, output logs to stderr.
            rotate (bool): If True, use RotatingFileHandler (10MB max, 5 backups).
        """
        self.level = getattr(logging, level.upper(), logging.WARNING)
        self.log_dir = Path(log_dir).expanduser() if log_dir else None
        self.log_filename = log_filename or FileNameStr("macfmt.log")
        self.to_console = to_console
        self.rotate = rotate

        self.__setup()

    def __setup(self) -> None:
        """
        Internal method to configure the root logger.
        """
        root = logging.getLogger()
        for handler in LoggerConfigurator._installed:
            root.removeHandler(handler)
            handler.close()
        LoggerConfigurator._installed = []

        fmt = logging.Formatter(self.FORMAT)
        handlers: list[logging.Handler] = []

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / self.log_filename
            if self.rotate:
                # Rotate after ~10MB, keep up to 5 old log files
                handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5))
            else:
                handlers.append(logging.FileHandler(log_file))

        if self.to_console:
            handlers.append(logging.StreamHandler(sys.stderr))

        root.setLevel(self.level)
        for handler in handlers:
            handler.setFormatter(fmt)
            root.addHandler(handler)
        LoggerConfigurator._installed = handlers

        root.debug("==== macfmt starting ====")

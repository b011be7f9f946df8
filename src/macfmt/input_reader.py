# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from macfmt.lib.types import PathLike

INTERACTIVE_PROMPT = "Input text. End input with Ctrl-d or EOF on a new line."


class InputReadError(Exception):
    """
    Input text could not be obtained.

    The message is ready to show to the user.
    """


class InputReader:
    """
    Obtain the text to scan from a file, from stdin, or from an editor.

    When stdin is an interactive terminal the configured editor is opened on an
    empty temporary file. If no editor is configured or it cannot be found on
    PATH, text is read directly from the terminal instead.
    """

    def __init__(self, editor: str = "", stdin: TextIO | None = None) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.editor = editor
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def read(self, file_path: PathLike | None = None) -> str:
        if file_path is not None:
            return self.read_file(file_path)
        if self.stdin.isatty():
            self.logger.debug("Detected interactive terminal, launching editor for input")
            return self.read_interactive()
        return self.read_stdin()

    def read_file(self, file_path: PathLike) -> str:
        self.logger.info("Reading input from file: %s", file_path)
        try:
            return Path(file_path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise InputReadError(f"File not found: {file_path}") from exc
        except PermissionError as exc:
            raise InputReadError(f"Permission denied reading file: {file_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Failed to read file '{file_path}': {exc}") from exc

    def read_stdin(self) -> str:
        self.logger.debug("Reading input from stdin")
        try:
            return self.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Failed to read from stdin: {exc}") from exc

    def read_interactive(self) -> str:
        command = self._resolve_editor()
        try:
            if command is None:
                print(INTERACTIVE_PROMPT, file=sys.stderr)
                return self.stdin.read()
            self.logger.debug("Opening $EDITOR (%r) for input. Save and quit to continue.", self.editor)
            return self._edit(command)
        except (OSError, UnicodeDecodeError, subprocess.CalledProcessError) as exc:
            raise InputReadError(f"Failed to read input: {exc}") from exc

    def _resolve_editor(self) -> list[str] | None:
        """
        Split the editor setting into an argv and check that it is on PATH.

        Returns:
            list[str] | None: The editor command, or None to fall back to reading the terminal.
        """
        if not self.editor:
            return None

        try:
            argv = shlex.split(self.editor)
        except ValueError:
            argv = []

        resolved = shutil.which(argv[0]) if argv else None
        if resolved is None:
            self.logger.warning("Editor not found. EDITOR=%r", self.editor)
            return None

        return [resolved, *argv[1:]]

    def _edit(self, command: list[str]) -> str:
        fd, tmp_name = tempfile.mkstemp(prefix="macfmt-", suffix=".txt")
        os.close(fd)
        tmp_path = Path(tmp_name)
        try:
            subprocess.run([*command, str(tmp_path)], check=True)
            return tmp_path.read_text(encoding="utf-8")
        finally:
            tmp_path.unlink(missing_ok=True)

# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import logging
import os
from typing import TypeVar

from macfmt.config.config_manager import ConfigManager
from macfmt.lib.mac_address import CasePolicy, MacAddressFormat
from macfmt.lib.types import FileNameStr, StringEnum

E = TypeVar("E", bound=StringEnum)


class MacFmtSettings:
    """Provides user configuration via class methods, with built-in defaults."""
    _cfg: ConfigManager | None  = None
    _logger                     = logging.getLogger("MacFmtSettings")

    _DEFAULT_LOG_LEVEL: str                 = "WARNING"
    _DEFAULT_FORMAT: MacAddressFormat       = MacAddressFormat.STANDARD
    _DEFAULT_CASE: CasePolicy               = CasePolicy.PRESERVE

    _LOG_LEVEL_ENV_VAR: str                 = "MACFMT_LOG_LEVEL"
    _EDITOR_ENV_VAR: str                    = "EDITOR"

    @classmethod
    def _config(cls) -> ConfigManager:
        if cls._cfg is None:
            cls._cfg = ConfigManager()
        return cls._cfg

    @classmethod
    def use_config(cls, config_path: str | None) -> None:
        """
        Swap the backing configuration file.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist.
        """
        cls._cfg = ConfigManager(config_path)

    @classmethod
    def config_file(cls) -> str:
        """Path of the configuration file in use, whether or not it exists."""
        return cls._config().get_config_path()

    @classmethod
    def _config_path(cls, *path: str) -> str:
        """Return dotted path for logging."""
        return ".".join(path)

    @classmethod
    def _get_str(cls, default: str, *path: str) -> str:
        value = cls._config().get(*path)
        if value is None or value == "":
            return default
        if not isinstance(value, str):
            coerced = str(value)
            cls._logger.error(
                "Non-string configuration value for '%s': %r; using coerced '%s'",
                cls._config_path(*path),
                value,
                coerced,
            )
            return coerced
        return value

    @classmethod
    def _get_bool(cls, default: bool, *path: str) -> bool:
        value = cls._config().get(*path)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        cls._logger.error(
            "Non-boolean configuration value for '%s': %r; using default '%s'",
            cls._config_path(*path),
            value,
            default,
        )
        return default

    @classmethod
    def _get_enum(cls, enum_type: type[E], default: E, *path: str) -> E:
        raw = cls._get_str(default.value, *path)
        try:
            return enum_type(raw.lower())
        except ValueError:
            cls._logger.error(
                "Invalid configuration value for '%s': %r; expected one of %s, using default '%s'",
                cls._config_path(*path),
                raw,
                ", ".join(member.value for member in enum_type),
                default.value,
            )
            return default

    @classmethod
    def log_level(cls) -> str:
        env_level = os.environ.get(cls._LOG_LEVEL_ENV_VAR, "").strip()
        if env_level:
            return env_level.upper()
        return cls._get_str(cls._DEFAULT_LOG_LEVEL, "logging", "log_level").upper()

    @classmethod
    def log_dir(cls) -> str | None:
        """Directory for the log file, or None when file logging is off."""
        value = cls._get_str("", "logging", "log_dir")
        return value or None

    @classmethod
    def log_filename(cls) -> FileNameStr:
        return FileNameStr(cls._get_str("macfmt.log", "logging", "log_filename"))

    @classmethod
    def log_rotate(cls) -> bool:
        return cls._get_bool(False, "logging", "rotate")

    @classmethod
    def default_format(cls) -> MacAddressFormat:
        return cls._get_enum(MacAddressFormat, cls._DEFAULT_FORMAT, "output", "format")

    @classmethod
    def default_case(cls) -> CasePolicy:
        return cls._get_enum(CasePolicy, cls._DEFAULT_CASE, "output", "case")

    @classmethod
    def editor(cls) -> str:
        """Editor command for interactive input; $EDITOR wins over the config file."""
        env_editor = os.environ.get(cls._EDITOR_ENV_VAR, "").strip()
        if env_editor:
            return env_editor
        return cls._get_str("", "editor").strip()

    @classmethod
    def reload(cls) -> None:
        """
        Reload the configuration settings.
        """
        cls._config().reload()

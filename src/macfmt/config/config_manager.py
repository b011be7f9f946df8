# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import json
import os
from typing import Any, TypeVar

T = TypeVar("T")


class ConfigManager:
    """
    Manages user configuration stored in JSON format.

    Path resolution order: explicit ``config_path``, then ``$MACFMT_CONFIG``,
    then ``~/.config/macfmt/config.json``. Only the last one is optional; a
    missing default file means an empty configuration.
    """

    CONFIG_ENV_VAR = "MACFMT_CONFIG"

    def __init__(self, config_path: str | None = None) -> None:

        CONFIG_NAME = "config.json"
        CONFIG_DIR = os.path.join("~", ".config", "macfmt")

        self._required = True
        if config_path:
            self._config_path = config_path
        elif os.environ.get(self.CONFIG_ENV_VAR):
            self._config_path = os.environ[self.CONFIG_ENV_VAR]
        else:
            self._config_path = os.path.expanduser(os.path.join(CONFIG_DIR, CONFIG_NAME))
            self._required = False

        self._config_data: dict[str, Any] = {}
        self._load()

    def get_config_path(self) -> str:
        return self._config_path

    def _load(self) -> None:
        """Loads the configuration JSON from disk."""
        actual_path = os.path.realpath(os.path.expanduser(self._config_path))

        if not os.path.exists(actual_path):
            if self._required:
                raise FileNotFoundError(f"Config file not found: {self._config_path}")
            self._config_data = {}
            return

        with open(actual_path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must hold a JSON object: {self._config_path}")
        self._config_data = data

    def get(self, *keys: str, fallback: T | None = None) -> T | None:
        """
        Walk nested sections by key, e.g. get("output", "format").

        Returns fallback as soon as a key is absent or a non-object is reached
        before the last key.
        """
        node: Any = self._config_data
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return fallback
            node = node[key]
        return node

    def reload(self) -> None:
        """Re-read the file, picking up edits made since construction."""
        self._load()

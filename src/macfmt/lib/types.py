# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import NewType

ExitCode = NewType("ExitCode", int)

# Enum String Type
class StringEnum(str, Enum):
    """Py3.10-compatible StrEnum shim."""
    pass

# ────────────────────────────────────────────────────────────────────────────────
# Paths / filesystem
# ────────────────────────────────────────────────────────────────────────────────
PathLike    = str | Path
FileNameStr = NewType("FileNameStr", str)

# ────────────────────────────────────────────────────────────────────────────────
# MAC address text
# ────────────────────────────────────────────────────────────────────────────────
MacAddressStr   = NewType("MacAddressStr", str)         # aa:bb:cc:dd:ee:ff | aa-bb-cc-dd-ee-ff | aabb.ccdd.eeff | aabbccddeeff
MacCandidateStr = NewType("MacCandidateStr", str)       # raw substring found by the scanner, not yet parsed

__all__ = [
    "ExitCode", "StringEnum",
    "PathLike", "FileNameStr",
    "MacAddressStr", "MacCandidateStr",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from macfmt.lib.mac_address import (
    CasePolicy,
    MacAddress,
    MacAddressFormat,
    MacAddressParseError,
    MacParseErrorKind,
    format_mac,
)
from macfmt.lib.mac_scanner import MacPatternFamily, MacScanner
from macfmt.processor import (
    MacAddressProcessor,
    MacBatchEntry,
    MacBatchResult,
    MacDiagnostic,
    NoMacAddressesFoundError,
    run,
)
from macfmt.version import __version__

scan    = MacScanner.scan
parse   = MacAddress.parse

__all__ = [
    "__version__",
    "CasePolicy", "MacAddress", "MacAddressFormat", "MacAddressParseError", "MacParseErrorKind",
    "MacPatternFamily", "MacScanner",
    "MacAddressProcessor", "MacBatchEntry", "MacBatchResult", "MacDiagnostic", "NoMacAddressesFoundError",
    "scan", "parse", "format_mac", "run",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from macfmt.lib.mac_address import (
    CasePolicy,
    MacAddress,
    MacAddressFormat,
    MacAddressParseError,
    MacParseErrorKind,
)
from macfmt.lib.mac_scanner import MacScanner
from macfmt.lib.types import MacAddressStr, MacCandidateStr


class NoMacAddressesFoundError(Exception):
    """
    The scanner found no candidate MAC addresses in the input.

    This ends the whole batch; no lines are produced.
    """

    def __init__(self, message: str = "No MAC addresses found in input") -> None:
        super().__init__(message)


class MacDiagnostic(BaseModel):
    """A candidate that looked like a MAC address but did not parse."""
    model_config = ConfigDict(frozen=True)

    candidate: MacCandidateStr  = Field(..., description="Substring found by the scanner")
    kind: MacParseErrorKind     = Field(..., description="Which parse check failed")
    message: str                = Field(..., description="Human readable reason")


class MacBatchEntry(BaseModel):
    """Result for one candidate: exactly one of line or diagnostic is set."""
    model_config = ConfigDict(frozen=True)

    candidate: MacCandidateStr          = Field(..., description="Substring found by the scanner")
    line: MacAddressStr | None          = Field(default=None, description="Formatted MAC address")
    diagnostic: MacDiagnostic | None    = Field(default=None, description="Parse failure")


class MacBatchResult(BaseModel):
    """
    Outcome of one batch run.

    Attributes:
        entries (list[MacBatchEntry]): One entry per candidate, in scanner order.
        lines (list[str]): Formatted addresses, in scanner order.
        diagnostics (list[MacDiagnostic]): Candidates that failed to parse, in scanner order.
    """
    model_config = ConfigDict(frozen=True)

    entries: list[MacBatchEntry] = Field(default_factory=list, description="Per-candidate results in scanner order")

    @property
    def lines(self) -> list[MacAddressStr]:
        return [e.line for e in self.entries if e.line is not None]

    @property
    def diagnostics(self) -> list[MacDiagnostic]:
        return [e.diagnostic for e in self.entries if e.diagnostic is not None]

    @property
    def total(self) -> int:
        return len(self.entries)


class MacAddressProcessor:
    """
    Scan text, parse each candidate and render it in one notation and case policy.

    A candidate that fails to parse is recorded as a diagnostic and the rest of
    the batch continues. The processor never prints or logs; reporting is up to
    the caller.
    """

    def __init__(self, fmt: MacAddressFormat = MacAddressFormat.STANDARD,
                 case: CasePolicy = CasePolicy.PRESERVE) -> None:
        self.fmt = fmt
        self.case = case

    def run(self, text: str) -> MacBatchResult:
        """
        Process every MAC address candidate in text.

        Returns:
            MacBatchResult: Formatted lines and per-candidate diagnostics. This
                counts as success even when every candidate failed to parse.

        Raises:
            NoMacAddressesFoundError: If the scanner found no candidates at all.
        """
        candidates = MacScanner.scan(text)
        if not candidates:
            raise NoMacAddressesFoundError()

        return MacBatchResult(entries=[self.process(candidate) for candidate in candidates])

    def process(self, candidate: MacCandidateStr | str) -> MacBatchEntry:
        """Parse and format a single candidate without raising on bad input."""
        try:
            mac = MacAddress(candidate)
        except MacAddressParseError as exc:
            diagnostic = MacDiagnostic(candidate=MacCandidateStr(candidate), kind=exc.kind, message=str(exc))
            return MacBatchEntry(candidate=MacCandidateStr(candidate), diagnostic=diagnostic)

        return MacBatchEntry(candidate=MacCandidateStr(candidate), line=mac.to_mac_format(self.fmt, self.case))


def run(text: str,
        fmt: MacAddressFormat = MacAddressFormat.STANDARD,
        case: CasePolicy = CasePolicy.PRESERVE) -> MacBatchResult:
    return MacAddressProcessor(fmt, case).run(text)

# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import pytest
from pydantic import ValidationError

import macfmt
from macfmt.lib.mac_address import CasePolicy, MacAddressFormat, MacParseErrorKind
from macfmt.processor import MacAddressProcessor, NoMacAddressesFoundError, run


def test_run_formats_every_candidate_in_scan_order() -> None:
    text = "a 0011.2233.4455 b AA:bb:CC:dd:EE:ff c 66778899aabb"
    result = run(text, MacAddressFormat.WINDOWS, CasePolicy.PRESERVE)

    assert result.lines == ["AA-bb-CC-dd-EE-ff", "00-11-22-33-44-55", "66-77-88-99-aa-bb"]
    assert result.diagnostics == []
    assert result.total == 3


def test_run_applies_case_policy() -> None:
    result = MacAddressProcessor(MacAddressFormat.CISCO, CasePolicy.UPPER).run("mac aa:bb:cc:dd:ee:ff")
    assert result.lines == ["AABB.CCDD.EEFF"]


def test_run_no_addresses_raises() -> None:
    with pytest.raises(NoMacAddressesFoundError) as excinfo:
        run("No MACs here", MacAddressFormat.STANDARD, CasePolicy.PRESERVE)
    assert "No MAC addresses found" in str(excinfo.value)


def test_parse_failure_does_not_abort_batch() -> None:
    processor = MacAddressProcessor()
    good = processor.process("aa:bb:cc:dd:ee:ff")
    bad = processor.process("aa:bb:cc:dd:ee")

    assert good.line == "aa:bb:cc:dd:ee:ff"
    assert good.diagnostic is None

    assert bad.line is None
    assert bad.diagnostic is not None
    assert bad.diagnostic.kind == MacParseErrorKind.INVALID_LENGTH
    assert bad.diagnostic.candidate == "aa:bb:cc:dd:ee"
    assert bad.diagnostic.message == "Invalid MAC address length: aa:bb:cc:dd:ee"


def test_process_reports_invalid_hex() -> None:
    entry = MacAddressProcessor().process("zz:bb:cc:dd:ee:ff")
    assert entry.diagnostic is not None
    assert entry.diagnostic.kind == MacParseErrorKind.INVALID_HEX


def test_entries_keep_candidates() -> None:
    result = run("x 1122.3344.5566 y aabbccddeeff")
    assert [e.candidate for e in result.entries] == ["1122.3344.5566", "aabbccddeeff"]
    assert result.lines == ["11:22:33:44:55:66", "aa:bb:cc:dd:ee:ff"]


def test_result_is_frozen() -> None:
    result = run("aa:bb:cc:dd:ee:ff")
    with pytest.raises(ValidationError):
        result.entries = []  # type: ignore[misc]


def test_package_entry_points() -> None:
    text = "Device 1: aa:bb:cc:dd:ee:ff\nDevice 2: 1122.3344.5566\nDevice 3: aabbccddeeff"
    assert macfmt.scan(text) == ["aa:bb:cc:dd:ee:ff", "1122.3344.5566", "aabbccddeeff"]

    mac = macfmt.parse("AA:bb:CC:dd:EE:ff")
    assert macfmt.format_mac(mac, macfmt.MacAddressFormat.CISCO, macfmt.CasePolicy.PRESERVE) == "AAbb.CCdd.EEff"
    assert macfmt.run(text, macfmt.MacAddressFormat.BARE, macfmt.CasePolicy.LOWER).lines == [
        "aabbccddeeff", "112233445566", "aabbccddeeff",
    ]


def test_run_mixed_delimiters_finds_nothing() -> None:
    with pytest.raises(NoMacAddressesFoundError):
        run("aa:bb-cc:dd-ee:ff", MacAddressFormat.STANDARD, CasePolicy.PRESERVE)

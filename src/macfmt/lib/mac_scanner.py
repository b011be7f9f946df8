# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import re
from enum import Enum
from typing import Final, cast

from macfmt.lib.types import MacCandidateStr


class MacPatternFamily(Enum):
    DELIMITED   = "delimited"   # xx:xx:xx:xx:xx:xx or xx-xx-xx-xx-xx-xx
    DOTTED      = "dotted"      # xxxx.xxxx.xxxx
    BARE        = "bare"        # xxxxxxxxxxxx


class MacScanner:
    """
    Find substrings of free-form text that look like MAC addresses.

    Each pattern family is run over the whole text on its own. Results are
    family-major: every delimited match comes first, then every dotted match,
    then every bare match, each family in left-to-right order. Downstream
    output order depends on this, so it is not document order.

    A delimited match uses one separator throughout; 'aa:bb-cc:dd-ee:ff' is
    not a candidate.

    Families may report overlapping text: in 'aabbccddeeff:11:22:33:44:55' the
    delimited family finds 'ff:11:22:33:44:55' and the bare family finds
    'aabbccddeeff'. Nothing is deduplicated.
    """

    PATTERNS: Final[tuple[tuple[MacPatternFamily, re.Pattern[str]], ...]] = (
        (MacPatternFamily.DELIMITED,    re.compile(r"[0-9a-fA-F]{2}([:-])(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}")),
        (MacPatternFamily.DOTTED,       re.compile(r"(?:[0-9a-fA-F]{4}\.){2}[0-9a-fA-F]{4}")),
        (MacPatternFamily.BARE,         re.compile(r"[0-9a-fA-F]{12}")),
    )

    @classmethod
    def scan_by_family(cls, text: str) -> dict[MacPatternFamily, list[MacCandidateStr]]:
        """
        Return the candidates found by each pattern family.

        The dict is ordered by family, and every family is present even when
        it found nothing.
        """
        return {
            family: [cast(MacCandidateStr, m.group(0)) for m in pattern.finditer(text)]
            for family, pattern in cls.PATTERNS
        }

    @classmethod
    def scan(cls, text: str) -> list[MacCandidateStr]:
        """
        Return every candidate MAC address substring in family-major order.

        Args:
            text (str): Arbitrary input text.

        Returns:
            list[str]: Raw matched substrings, empty when nothing matches.
        """
        candidates: list[MacCandidateStr] = []
        for matches in cls.scan_by_family(text).values():
            candidates.extend(matches)
        return candidates

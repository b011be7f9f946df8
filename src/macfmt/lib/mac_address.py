# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import re
from enum import Enum
from typing import Final, cast

from macfmt.lib.types import MacAddressStr, StringEnum

MAC_OCTET_COUNT: Final[int] = 6
MAC_DIGIT_COUNT: Final[int] = MAC_OCTET_COUNT * 2

# Separators removed before parsing, wherever they occur in the input
_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[-:. ]")
_HEX_PAIR_RE: Final[re.Pattern[str]]  = re.compile(r"[0-9a-fA-F]{2}")


class MacAddressFormat(StringEnum):
    STANDARD    = "standard"    # e.g., '00:1a:2b:3c:4d:5e'
    CISCO       = "cisco"       # e.g., '001a.2b3c.4d5e'
    WINDOWS     = "windows"     # e.g., '00-1a-2b-3c-4d-5e'
    BARE        = "bare"        # e.g., '001a2b3c4d5e'


class CasePolicy(StringEnum):
    PRESERVE    = "preserve"    # keep the letter case seen in the source text
    UPPER       = "upper"
    LOWER       = "lower"


# (digits per group, separator) for each output notation
_LAYOUT: Final[dict[MacAddressFormat, tuple[int, str]]] = {
    MacAddressFormat.STANDARD:  (2, ":"),
    MacAddressFormat.CISCO:     (4, "."),
    MacAddressFormat.WINDOWS:   (2, "-"),
    MacAddressFormat.BARE:      (MAC_DIGIT_COUNT, ""),
}


class MacParseErrorKind(Enum):
    INVALID_LENGTH  = "invalid_length"
    INVALID_HEX     = "invalid_hex"


class MacAddressParseError(ValueError):
    """
    Raised when a candidate string cannot be turned into a MacAddress.

    Attributes
    ----------
    kind:
        Which check failed (length or hex digits).
    text:
        The original, uncleaned input.
    """

    def __init__(self, kind: MacParseErrorKind, text: str) -> None:
        self.kind = kind
        self.text = text
        if kind == MacParseErrorKind.INVALID_LENGTH:
            message = f"Invalid MAC address length: {text}"
        else:
            message = f"Invalid hex in MAC address: {text}"
        super().__init__(message)


class MacAddress:
    """
    A 6-byte MAC address plus the letter case of each of its 12 source digits.

    The octets are the identity of the address; the case flags only exist so
    that output can reproduce the case the address was written in.
    """

    __slots__ = ("_octets", "_digit_case")

    def __init__(self, mac_address: MacAddressStr | str) -> None:
        """
        Parse a MAC address string.

        Accepts colon, dash, dot, space separated or bare input. Separators are
        stripped wherever they appear, so mixed separators are accepted as long
        as exactly 12 characters remain.

        Args:
            mac_address (str): MAC address text, e.g. 'aa:bb:cc:dd:ee:ff' or 'aabb.ccdd.eeff'.

        Raises:
            MacAddressParseError: If the cleaned text is not 12 bytes long (UTF-8)
                or holds a non-hex character.
        """
        cleaned = _SEPARATOR_RE.sub("", mac_address)

        # measured in UTF-8 bytes, so non-ASCII input counts its encoded width
        if len(cleaned.encode("utf-8", "surrogatepass")) != MAC_DIGIT_COUNT:
            raise MacAddressParseError(MacParseErrorKind.INVALID_LENGTH, mac_address)

        octets: list[int] = []
        digit_case: list[bool] = []

        for i in range(0, MAC_DIGIT_COUNT, 2):
            chunk = cleaned[i:i + 2]
            digit_case.extend(ch.isupper() for ch in chunk)
            if not _HEX_PAIR_RE.fullmatch(chunk):
                raise MacAddressParseError(MacParseErrorKind.INVALID_HEX, mac_address)
            octets.append(int(chunk, 16))

        self._octets: tuple[int, ...]       = tuple(octets)
        self._digit_case: tuple[bool, ...]  = tuple(digit_case)

    @classmethod
    def parse(cls, mac_address: MacAddressStr | str) -> MacAddress:
        """Alias of the constructor, reads better at call sites that only parse."""
        return cls(mac_address)

    @classmethod
    def from_bytes(cls, mac_bytes: bytes | bytearray) -> MacAddress:
        """
        Construct A MacAddress From A 6-Byte Sequence.

        All digits are recorded as lowercase.

        Raises
        ------
        ValueError
            If mac_bytes is not exactly 6 bytes long.
        """
        if len(mac_bytes) != MAC_OCTET_COUNT:
            raise ValueError(f"MAC address must be exactly 6 bytes, got {len(mac_bytes)} bytes.")
        return cls(bytes(mac_bytes).hex())

    @staticmethod
    def is_valid(mac_address: str) -> bool:
        """
        Static method to validate a MAC address.

        Returns:
            bool: True if the text parses, otherwise False.
        """
        try:
            MacAddress(mac_address)
            return True
        except MacAddressParseError:
            return False

    @property
    def octets(self) -> tuple[int, ...]:
        return self._octets

    @property
    def digit_case(self) -> tuple[bool, ...]:
        """Per-digit uppercase flags, most-significant nibble of octet 0 first."""
        return self._digit_case

    def to_bytes(self) -> bytes:
        return bytes(self._octets)

    def hex_digits(self, case: CasePolicy = CasePolicy.PRESERVE) -> str:
        """
        Render the 12 hex digits with the requested case policy applied per digit.

        Every notation is built from this string; only separators differ.
        """
        lowered = "".join(f"{octet:02x}" for octet in self._octets)

        if case == CasePolicy.UPPER:
            return lowered.upper()
        if case == CasePolicy.LOWER:
            return lowered

        return "".join(
            digit.upper() if upper else digit
            for digit, upper in zip(lowered, self._digit_case)
        )

    def to_mac_format(self, fmt: MacAddressFormat = MacAddressFormat.STANDARD,
                      case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
        """
        Convert the MAC address to a specific string format.

        Args:
            fmt (MacAddressFormat): Desired output notation.
            case (CasePolicy): Preserve the source case or force upper/lower.

        Returns:
            str: Formatted MAC address.
        """
        try:
            width, separator = _LAYOUT[fmt]
        except KeyError:
            raise ValueError(f"Unsupported MAC address format: {fmt}") from None

        digits = self.hex_digits(case)
        return cast(MacAddressStr, separator.join(digits[i:i + width] for i in range(0, MAC_DIGIT_COUNT, width)))

    def to_standard(self, case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
        return self.to_mac_format(MacAddressFormat.STANDARD, case)

    def to_cisco(self, case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
        return self.to_mac_format(MacAddressFormat.CISCO, case)

    def to_windows(self, case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
        return self.to_mac_format(MacAddressFormat.WINDOWS, case)

    def to_bare(self, case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
        return self.to_mac_format(MacAddressFormat.BARE, case)

    def __str__(self) -> str:
        return self.to_standard()

    def __repr__(self) -> str:
        return f"MacAddress('{self}')"

    def __hash__(self) -> int:
        """
        Hash based on the octets only, so the same address written in a
        different case lands in the same set/dict slot.
        """
        return hash(self._octets)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MacAddress) and self._octets == other._octets


def format_mac(address: MacAddress,
               fmt: MacAddressFormat = MacAddressFormat.STANDARD,
               case: CasePolicy = CasePolicy.PRESERVE) -> MacAddressStr:
    return address.to_mac_format(fmt, case)

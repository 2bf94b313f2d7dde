"""
Royal Mail Barcode Structure

Barcode format (13 characters):
- Position 1-2:   Uppercase letters (A-Z) - Prefix
- Position 3-10:  Digits (0-9) - Serial number
- Position 11:    Digit (0-9) - Check digit
- Position 12-13: "GB" - Country code

Parsing here is positional only. Nothing in this module decides whether a
barcode is valid; see ``rm_barcode.validators``.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict

from .check_digit import calculate_check_digit, is_serial_number
from ..exceptions import InvalidInputError


BARCODE_LENGTH = 13
COUNTRY_CODE = "GB"

PREFIX_SLICE = slice(0, 2)
SERIAL_NUMBER_SLICE = slice(2, 10)
CHECK_DIGIT_SLICE = slice(10, 11)
COUNTRY_CODE_SLICE = slice(11, 13)

UPPERCASE_LETTERS = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')


@dataclass(frozen=True)
class BarcodeComponents:
    """
    The four fixed-width fields of a barcode.

    Attributes:
        prefix: Characters [0, 2)
        serial_number: Characters [2, 10)
        check_digit: Character [10, 11)
        country_code: Characters [11, 13)
    """
    prefix: str
    serial_number: str
    check_digit: str
    country_code: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary representation."""
        return asdict(self)


def normalize_barcode(raw: str) -> str:
    """Strip surrounding whitespace and uppercase."""
    return raw.strip().upper()


def parse_barcode_components(barcode: str) -> BarcodeComponents:
    """
    Split a barcode into its components.

    Does not validate. A string shorter than 13 characters yields
    truncated or empty fields rather than an error.
    """
    return BarcodeComponents(
        prefix=barcode[PREFIX_SLICE],
        serial_number=barcode[SERIAL_NUMBER_SLICE],
        check_digit=barcode[CHECK_DIGIT_SLICE],
        country_code=barcode[COUNTRY_CODE_SLICE],
    )


def build_barcode(prefix: str, serial_number: str) -> str:
    """
    Build a valid barcode from a prefix and serial number.

    The prefix is normalized first, so "ab" and "AB" are equivalent.

    Raises:
        InvalidInputError: If the prefix is not two letters or the serial
            is not eight digits

    Example:
        >>> build_barcode("ab", "47312482")
        'AB473124829GB'
    """
    prefix = normalize_barcode(prefix)
    if len(prefix) != 2 or not all(c in UPPERCASE_LETTERS for c in prefix):
        raise InvalidInputError("Prefix must be exactly 2 letters")
    if not is_serial_number(serial_number):
        raise InvalidInputError("Serial number must be exactly 8 digits")

    return f"{prefix}{serial_number}{calculate_check_digit(serial_number)}{COUNTRY_CODE}"

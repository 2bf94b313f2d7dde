"""
Royal Mail Check Digit

Implements the weighted modulo-11 check digit used by the 13-character
Royal Mail barcode (e.g. AB473124829GB):

1. Multiply each digit of the 8-digit serial by the positional weights
   8, 6, 4, 2, 3, 5, 9, 7 (most significant digit first)
2. Sum all products
3. Check digit = 11 - (sum mod 11)
4. Remap 10 -> 0, then 11 -> 5
"""

from __future__ import annotations

from typing import Tuple

from ..exceptions import InvalidInputError


CHECK_DIGIT_WEIGHTS: Tuple[int, ...] = (8, 6, 4, 2, 3, 5, 9, 7)
SERIAL_NUMBER_LENGTH = len(CHECK_DIGIT_WEIGHTS)

# str.isdigit() accepts non-ASCII digits, so compare against this set
ASCII_DIGITS = frozenset('0123456789')


def is_serial_number(value: str) -> bool:
    """True if ``value`` is exactly eight ASCII digits."""
    return len(value) == SERIAL_NUMBER_LENGTH and all(c in ASCII_DIGITS for c in value)


def calculate_check_digit(serial_number: str) -> int:
    """
    Calculate the Royal Mail check digit for an 8-digit serial number.

    Args:
        serial_number: Exactly eight ASCII digits

    Returns:
        Calculated check digit (0-9)

    Raises:
        InvalidInputError: If the serial is not exactly eight digits

    Example:
        >>> calculate_check_digit("47312482")
        9
    """
    if not isinstance(serial_number, str) or not is_serial_number(serial_number):
        raise InvalidInputError("Serial number must be exactly 8 digits")

    weighted_sum = sum(
        int(digit) * weight
        for digit, weight in zip(serial_number, CHECK_DIGIT_WEIGHTS)
    )

    result = 11 - (weighted_sum % 11)

    # Order matters: 10 first, then 11
    if result == 10:
        return 0
    if result == 11:
        return 5
    return result

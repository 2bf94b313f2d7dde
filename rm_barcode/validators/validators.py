"""
Royal Mail Barcode Validation Functions

Implements the pre-validation performed before a barcode is sent on:
- Empty and length checks on the normalized string
- Prefix validation (AA-ZZ)
- Serial number validation (00000000-99999999)
- Country code validation (GB)
- Check digit validation (weighted mod 11)

Validation short-circuits: the first failing step's message is returned
and later steps are not run. The step order is fixed by VALIDATION_STEPS.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.barcode import (
    BarcodeComponents,
    normalize_barcode,
    parse_barcode_components,
    BARCODE_LENGTH,
    COUNTRY_CODE,
    UPPERCASE_LETTERS,
)
from ..core.check_digit import ASCII_DIGITS, calculate_check_digit, is_serial_number


logger = logging.getLogger(__name__)


# Error messages
EMPTY_MESSAGE = "Validation failed - Barcode cannot be empty"
LENGTH_MESSAGE = "Validation failed - Barcode is not the correct length"
PREFIX_MESSAGE = "Validation failed - Prefix is not in the range AA to ZZ"
SERIAL_NUMBER_MESSAGE = "Validation failed - Serial number is not in the range 00000000 to 99999999"
COUNTRY_CODE_MESSAGE = "Validation failed - Country code is not GB"
CHECK_DIGIT_MESSAGE = "Validation failed - Check digit is not correct"


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation operation."""
    is_valid: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=message)

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        output: Dict[str, Any] = {"is_valid": self.is_valid}
        if self.error_message is not None:
            output["error_message"] = self.error_message
        return output


VALID = ValidationResult.ok()


def validate_prefix(prefix: str) -> ValidationResult:
    """Validate that the prefix is exactly two uppercase letters A-Z."""
    if len(prefix) != 2 or not all(c in UPPERCASE_LETTERS for c in prefix):
        return ValidationResult.fail(PREFIX_MESSAGE)
    return VALID


def validate_serial_number(serial_number: str) -> ValidationResult:
    """Validate that the serial number is exactly 8 digits."""
    if not is_serial_number(serial_number):
        return ValidationResult.fail(SERIAL_NUMBER_MESSAGE)
    return VALID


def validate_country_code(country_code: str) -> ValidationResult:
    """Validate that the country code is exactly "GB"."""
    if country_code != COUNTRY_CODE:
        return ValidationResult.fail(COUNTRY_CODE_MESSAGE)
    return VALID


def validate_check_digit(serial_number: str, check_digit: str) -> ValidationResult:
    """
    Validate the check digit against the value calculated from the serial.

    The serial must already be eight digits; a malformed serial raises
    InvalidInputError from calculate_check_digit.

    Args:
        serial_number: Eight-digit serial number
        check_digit: The single provided check digit character

    Returns:
        ValidationResult
    """
    expected = calculate_check_digit(serial_number)

    if len(check_digit) != 1 or check_digit not in ASCII_DIGITS:
        return ValidationResult.fail(CHECK_DIGIT_MESSAGE)

    if int(check_digit) != expected:
        return ValidationResult.fail(CHECK_DIGIT_MESSAGE)

    return VALID


@dataclass(frozen=True)
class ValidationStep:
    """
    One named rule of the barcode validation pipeline.

    Attributes:
        name: Short identifier used in logs and diagnostics
        check: Callable taking the normalized barcode and its components
    """
    name: str
    check: Callable[[str, BarcodeComponents], ValidationResult]

    def __call__(self, barcode: str, components: BarcodeComponents) -> ValidationResult:
        return self.check(barcode, components)


def _check_not_empty(barcode: str, components: BarcodeComponents) -> ValidationResult:
    if not barcode:
        return ValidationResult.fail(EMPTY_MESSAGE)
    return VALID


def _check_length(barcode: str, components: BarcodeComponents) -> ValidationResult:
    if len(barcode) != BARCODE_LENGTH:
        return ValidationResult.fail(LENGTH_MESSAGE)
    return VALID


# Country code is checked before the check digit, so a wrong country code
# is reported even when the check digit is also wrong.
VALIDATION_STEPS: Tuple[ValidationStep, ...] = (
    ValidationStep("empty", _check_not_empty),
    ValidationStep("length", _check_length),
    ValidationStep("prefix", lambda _, c: validate_prefix(c.prefix)),
    ValidationStep("serial_number", lambda _, c: validate_serial_number(c.serial_number)),
    ValidationStep("country_code", lambda _, c: validate_country_code(c.country_code)),
    ValidationStep("check_digit", lambda _, c: validate_check_digit(c.serial_number, c.check_digit)),
)


def find_failing_step(barcode: str) -> Optional[Tuple[ValidationStep, ValidationResult]]:
    """Run VALIDATION_STEPS in order and return the first failure, if any."""
    components = parse_barcode_components(barcode)
    for step in VALIDATION_STEPS:
        result = step(barcode, components)
        if not result.is_valid:
            return step, result
    return None


def validate_barcode(barcode: str) -> ValidationResult:
    """
    Validate an already-normalized barcode.

    Args:
        barcode: Normalized barcode string (see normalize_barcode)

    Returns:
        ValidationResult with the first failing step's message, or a
        valid result if every step passes

    Example:
        >>> validate_barcode("AB473124829GB").is_valid
        True
        >>> validate_barcode("AB473124829US").error_message
        'Validation failed - Country code is not GB'
    """
    failure = find_failing_step(barcode)
    if failure is None:
        return VALID

    step, result = failure
    logger.debug("Barcode %r failed step %s", barcode, step.name)
    return result


def validate_raw_barcode(raw: str) -> ValidationResult:
    """Normalize raw user input, then validate it."""
    return validate_barcode(normalize_barcode(raw))

"""
Royal Mail Barcode Validator

Validates 13-character Royal Mail barcodes (two letters, eight-digit
serial, check digit, "GB"), including the weighted modulo-11 check digit.

Validation is pure and synchronous. The simulated server confirmation in
``rm_barcode.confirmation`` is a separate, asynchronous step.
"""

from .core.barcode import (
    BarcodeComponents,
    normalize_barcode,
    parse_barcode_components,
    build_barcode,
    BARCODE_LENGTH,
    COUNTRY_CODE,
)
from .core.check_digit import calculate_check_digit, CHECK_DIGIT_WEIGHTS
from .validators.validators import (
    validate_barcode,
    validate_raw_barcode,
    validate_prefix,
    validate_serial_number,
    validate_country_code,
    validate_check_digit,
    ValidationResult,
    ValidationStep,
    VALIDATION_STEPS,
)
from .formatters.json_formatter import (
    validate_to_json,
    validate_to_dict,
    format_validation_result_json,
)
from .confirmation import confirm_barcode, confirm_many, ConfirmationResult
from .exceptions import BarcodeError, InvalidInputError, ConfirmationError

__version__ = "1.0.0"
__all__ = [
    "BarcodeComponents",
    "normalize_barcode",
    "parse_barcode_components",
    "build_barcode",
    "BARCODE_LENGTH",
    "COUNTRY_CODE",
    "calculate_check_digit",
    "CHECK_DIGIT_WEIGHTS",
    "validate_barcode",
    "validate_raw_barcode",
    "validate_prefix",
    "validate_serial_number",
    "validate_country_code",
    "validate_check_digit",
    "ValidationResult",
    "ValidationStep",
    "VALIDATION_STEPS",
    "validate_to_json",
    "validate_to_dict",
    "format_validation_result_json",
    "confirm_barcode",
    "confirm_many",
    "ConfirmationResult",
    "BarcodeError",
    "InvalidInputError",
    "ConfirmationError",
]

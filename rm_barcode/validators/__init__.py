"""
Validation modules for the Royal Mail barcode validator.
"""

from .validators import (
    validate_barcode,
    validate_raw_barcode,
    validate_prefix,
    validate_serial_number,
    validate_country_code,
    validate_check_digit,
    find_failing_step,
    ValidationResult,
    ValidationStep,
    VALIDATION_STEPS,
)

__all__ = [
    "validate_barcode",
    "validate_raw_barcode",
    "validate_prefix",
    "validate_serial_number",
    "validate_country_code",
    "validate_check_digit",
    "find_failing_step",
    "ValidationResult",
    "ValidationStep",
    "VALIDATION_STEPS",
]

"""
Core barcode structure and check digit modules.
"""

from .barcode import (
    BarcodeComponents,
    normalize_barcode,
    parse_barcode_components,
    build_barcode,
    BARCODE_LENGTH,
    COUNTRY_CODE,
)
from .check_digit import (
    calculate_check_digit,
    is_serial_number,
    CHECK_DIGIT_WEIGHTS,
)

__all__ = [
    "BarcodeComponents",
    "normalize_barcode",
    "parse_barcode_components",
    "build_barcode",
    "BARCODE_LENGTH",
    "COUNTRY_CODE",
    "calculate_check_digit",
    "is_serial_number",
    "CHECK_DIGIT_WEIGHTS",
]

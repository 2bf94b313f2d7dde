"""
Output formatters for the Royal Mail barcode validator.
"""

from .json_formatter import (
    validate_to_json,
    validate_to_dict,
    format_validation_result_json,
    format_components,
    build_result_dict,
)

__all__ = [
    "validate_to_json",
    "validate_to_dict",
    "format_validation_result_json",
    "format_components",
    "build_result_dict",
]

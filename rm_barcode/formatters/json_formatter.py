"""
JSON Formatter for Royal Mail Barcode Validation

Provides clean JSON output with:
- Human-readable field names
- The single failing reason, if any
- Optional component breakdown for field-level diagnostics
"""

from __future__ import annotations

import json
from typing import Any, Dict

from ..core.barcode import normalize_barcode, parse_barcode_components
from ..core.check_digit import calculate_check_digit, is_serial_number
from ..validators.validators import ValidationResult, validate_barcode


# Component attribute to human-readable name mapping
COMPONENT_FIELD_NAMES = {
    "prefix": "Prefix",
    "serial_number": "Serial Number",
    "check_digit": "Check Digit",
    "country_code": "Country Code",
}


def format_components(barcode: str) -> Dict[str, Any]:
    """
    Break a barcode into named components.

    Adds "Expected Check Digit" when the serial number is well formed.
    """
    components = parse_barcode_components(barcode)
    output: Dict[str, Any] = {
        COMPONENT_FIELD_NAMES[key]: value
        for key, value in components.to_dict().items()
    }
    if is_serial_number(components.serial_number):
        output["Expected Check Digit"] = str(calculate_check_digit(components.serial_number))
    return output


def build_result_dict(
    barcode: str,
    result: ValidationResult,
    include_components: bool = False
) -> Dict[str, Any]:
    """Build the output dictionary for one validated barcode."""
    output: Dict[str, Any] = {
        "Barcode": barcode,
        "Valid": result.is_valid,
    }
    if not result.is_valid:
        output["Error"] = result.error_message
    if include_components:
        output["Components"] = format_components(barcode)
    return output


def format_validation_result_json(
    barcode: str,
    result: ValidationResult,
    include_components: bool = False
) -> str:
    """
    Format a validation result as JSON.

    Args:
        barcode: The barcode that was validated (normalized form)
        result: Result from validate_barcode()
        include_components: Include the component breakdown (default: False)

    Returns:
        JSON string
    """
    output = build_result_dict(barcode, result, include_components=include_components)
    return json.dumps(output, ensure_ascii=False, indent=2)


def validate_to_dict(
    raw: str,
    include_components: bool = False,
    normalize: bool = True
) -> Dict[str, Any]:
    """
    Validate a barcode and return a dictionary.

    Args:
        raw: Barcode as entered by the user
        include_components: Include the component breakdown (default: False)
        normalize: Trim and uppercase before validating (default: True)

    Returns:
        Dictionary with "Barcode", "Valid" and, on failure, "Error"

    Example:
        >>> validate_to_dict("  ab473124829gb ")
        {'Barcode': 'AB473124829GB', 'Valid': True}
    """
    barcode = normalize_barcode(raw) if normalize else raw
    result = validate_barcode(barcode)
    return build_result_dict(barcode, result, include_components=include_components)


def validate_to_json(
    raw: str,
    include_components: bool = False,
    normalize: bool = True
) -> str:
    """
    Validate a barcode and return clean JSON output.

    This is the main entry point for scripts.

    Example:
        >>> print(validate_to_json("AB473124820GB"))
        {
          "Barcode": "AB473124820GB",
          "Valid": false,
          "Error": "Validation failed - Check digit is not correct"
        }
    """
    output = validate_to_dict(raw, include_components=include_components, normalize=normalize)
    return json.dumps(output, ensure_ascii=False, indent=2)

"""
Tests for JSON formatter output.

Ensures clean JSON output with:
- Human-readable field names
- The single failing reason on invalid input
- Optional component breakdown
"""

import json

from rm_barcode import (
    validate_barcode,
    validate_to_json,
    validate_to_dict,
    format_validation_result_json,
)


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_valid_json_output(self):
        data = json.loads(validate_to_json("AB473124829GB"))
        assert data == {"Barcode": "AB473124829GB", "Valid": True}

    def test_invalid_json_output(self):
        data = json.loads(validate_to_json("AB473124820GB"))
        assert data["Valid"] is False
        assert data["Error"] == "Validation failed - Check digit is not correct"

    def test_input_is_normalized(self):
        data = validate_to_dict("  ab473124829gb  ")
        assert data["Barcode"] == "AB473124829GB"
        assert data["Valid"] is True

    def test_no_normalize(self):
        data = validate_to_dict("ab473124829gb", normalize=False)
        assert data["Barcode"] == "ab473124829gb"
        assert "Prefix" in data["Error"]

    def test_components(self):
        data = validate_to_dict("AB473124820GB", include_components=True)
        assert data["Components"] == {
            "Prefix": "AB",
            "Serial Number": "47312482",
            "Check Digit": "0",
            "Country Code": "GB",
            "Expected Check Digit": "9",
        }

    def test_components_without_expected_for_bad_serial(self):
        data = validate_to_dict("AB4731248X9GB", include_components=True)
        assert "Expected Check Digit" not in data["Components"]
        assert data["Components"]["Serial Number"] == "4731248X"

    def test_components_for_empty_input(self):
        data = validate_to_dict("", include_components=True)
        assert data["Valid"] is False
        assert "empty" in data["Error"]
        assert data["Components"]["Prefix"] == ""

    def test_format_existing_result(self):
        result = validate_barcode("AB473124829US")
        data = json.loads(format_validation_result_json("AB473124829US", result))
        assert data["Error"] == "Validation failed - Country code is not GB"

    def test_non_ascii_preserved(self):
        output = validate_to_json("ÄB473124829GB")
        assert "ÄB473124829GB" in output

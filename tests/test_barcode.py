"""
Tests for normalization, component parsing and barcode building.
"""

import pytest

from rm_barcode import (
    BarcodeComponents,
    build_barcode,
    normalize_barcode,
    parse_barcode_components,
    InvalidInputError,
)


class TestNormalizeBarcode:
    """Trim and uppercase."""

    def test_trims_and_uppercases(self):
        assert normalize_barcode("  ab473124829gb  ") == "AB473124829GB"

    def test_tabs_and_newlines(self):
        assert normalize_barcode("\tAB473124829GB\n") == "AB473124829GB"

    def test_inner_whitespace_kept(self):
        assert normalize_barcode(" AB 473124829GB ") == "AB 473124829GB"

    def test_empty(self):
        assert normalize_barcode("") == ""
        assert normalize_barcode("   ") == ""

    @pytest.mark.parametrize("raw", [
        "", "  ", "ab473124829gb", "  AB473124829GB  ", "xh545554533Gb\n",
        "straße", "12 ab", "\tmixed Case\t",
    ])
    def test_idempotent(self, raw):
        once = normalize_barcode(raw)
        assert normalize_barcode(once) == once


class TestParseBarcodeComponents:
    """Positional slicing, no validation."""

    def test_valid_barcode(self):
        components = parse_barcode_components("AB473124829GB")
        assert components == BarcodeComponents(
            prefix="AB",
            serial_number="47312482",
            check_digit="9",
            country_code="GB",
        )

    def test_invalid_content_still_parsed(self):
        components = parse_barcode_components("12ABCDEFGHXUS")
        assert components.prefix == "12"
        assert components.serial_number == "ABCDEFGH"
        assert components.check_digit == "X"
        assert components.country_code == "US"

    def test_short_string_truncates(self):
        components = parse_barcode_components("AB4731")
        assert components.prefix == "AB"
        assert components.serial_number == "4731"
        assert components.check_digit == ""
        assert components.country_code == ""

    def test_empty_string(self):
        components = parse_barcode_components("")
        assert components.to_dict() == {
            "prefix": "",
            "serial_number": "",
            "check_digit": "",
            "country_code": "",
        }


class TestBuildBarcode:
    """Building valid barcodes from prefix and serial."""

    def test_build(self):
        assert build_barcode("AB", "47312482") == "AB473124829GB"
        assert build_barcode("xh", "54555453") == "XH545554533GB"
        assert build_barcode("AA", "00000000") == "AA000000005GB"

    @pytest.mark.parametrize("prefix, serial", [
        ("A", "47312482"),
        ("ABC", "47312482"),
        ("1B", "47312482"),
        ("AB", "4731248"),
        ("AB", "4731248X"),
    ])
    def test_build_rejects_malformed(self, prefix, serial):
        with pytest.raises(InvalidInputError):
            build_barcode(prefix, serial)

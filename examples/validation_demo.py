"""
Demo: Barcode Validation

Shows the verdict and failure reason for a set of sample barcodes, the
check digit calculation, and the simulated server confirmation.
"""

import asyncio
import json
import random

from rm_barcode import (
    build_barcode,
    calculate_check_digit,
    confirm_many,
    normalize_barcode,
    validate_barcode,
    validate_to_json,
)


def demo_validation():
    """Validate valid and invalid samples."""

    print("=" * 80)
    print("  VALIDATION DEMO")
    print("=" * 80)

    test_cases = [
        ("Valid barcode", "AB473124829GB"),
        ("Valid (check digit 10 -> 0)", "XY700000000GB"),
        ("Valid (check digit 11 -> 5)", "AA000000005GB"),
        ("Lowercase with spaces", "  ab473124829gb  "),
        ("Empty", ""),
        ("Wrong length", "AB4731248GB"),
        ("Digits in prefix", "12473124829GB"),
        ("Wrong check digit", "AB473124820GB"),
        ("Wrong country code", "AB473124829US"),
    ]

    for title, raw in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {raw!r}")
        print(validate_to_json(raw, include_components=True))


def demo_check_digit():
    """Show the weighted sum behind a check digit."""

    print("\n\n" + "=" * 80)
    print("  CHECK DIGIT EXAMPLES")
    print("=" * 80)

    for serial in ("47312482", "70000000", "00000000", "54555453"):
        print(f"  {serial} -> {calculate_check_digit(serial)}")

    print(f"\n  build_barcode('xh', '54555453') -> {build_barcode('xh', '54555453')}")


def demo_confirmation():
    """Run the simulated server confirmation with short delays."""

    print("\n\n" + "=" * 80)
    print("  SERVER CONFIRMATION (simulated)")
    print("=" * 80)

    barcodes = [
        normalize_barcode(raw)
        for raw in ("AB473124829GB", "xh545554533gb", "AA000000005GB")
    ]
    passing = [b for b in barcodes if validate_barcode(b).is_valid]
    results = asyncio.run(
        confirm_many(passing, min_delay=0.1, max_delay=0.5, rng=random.Random(7))
    )
    for result in results:
        print(json.dumps(result.__dict__, indent=2))


if __name__ == "__main__":
    demo_validation()
    demo_check_digit()
    demo_confirmation()

"""
CLI interface for the Royal Mail barcode validator.

Usage:
    python -m rm_barcode "<barcode>" [<barcode> ...] [options]

Options:
    --json                 Output as JSON
    --components           Include the component breakdown in JSON output
    --no-normalize         Don't trim/uppercase input before validating
    --check-digit SERIAL   Print the check digit for an 8-digit serial
    --confirm              Send passing barcodes for (simulated) server confirmation
"""

import argparse
import asyncio
import json
import sys
from typing import Dict, List, Optional

from .confirmation import confirm_many
from .core.barcode import normalize_barcode, parse_barcode_components
from .core.check_digit import calculate_check_digit
from .exceptions import InvalidInputError
from .formatters.json_formatter import build_result_dict
from .logging_setup import configure_logging
from .validators.validators import ValidationResult, validate_barcode


def format_result(raw: str, barcode: str, result: ValidationResult) -> str:
    """Format one validation result for display."""
    components = parse_barcode_components(barcode)
    lines = [
        "=" * 60,
        "Royal Mail Barcode Validation",
        "=" * 60,
        f"Raw Input: {raw!r}",
        f"Normalized: {barcode!r}",
        "",
        "Components:",
        "-" * 40,
        f"  Prefix:        {components.prefix!r}",
        f"  Serial Number: {components.serial_number!r}",
        f"  Check Digit:   {components.check_digit!r}",
        f"  Country Code:  {components.country_code!r}",
        "",
    ]

    if result.is_valid:
        lines.append("Result: VALID")
    else:
        lines.append("Result: INVALID")
        lines.append(f"  {result.error_message}")

    return '\n'.join(lines)


def _confirm(barcodes: List[str], outputs: List[Dict]) -> bool:
    """Run confirmations for passing barcodes and record their outcome."""
    passing = [i for i, out in enumerate(outputs) if out["Valid"]]
    if not passing:
        return False

    # Results come back in input order; pair by position since barcodes may repeat
    confirmations = asyncio.run(confirm_many([barcodes[i] for i in passing]))
    all_confirmed = True
    for i, confirmation in zip(passing, confirmations):
        out = outputs[i]
        out["Confirmed"] = confirmation.success
        out["Server Message"] = confirmation.message
        all_confirmed = all_confirmed and confirmation.success
    return all_confirmed


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='rm_barcode',
        description='Validate Royal Mail barcodes (e.g. AB473124829GB)'
    )

    parser.add_argument(
        'barcodes',
        nargs='*',
        metavar='barcode',
        help='Barcode(s) to validate'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--components',
        action='store_true',
        help='Include the component breakdown in JSON output'
    )

    parser.add_argument(
        '--no-normalize',
        action='store_true',
        help='Validate input exactly as given (no trim/uppercase)'
    )

    parser.add_argument(
        '--check-digit',
        metavar='SERIAL',
        default=None,
        help='Print the check digit for an 8-digit serial number and exit'
    )

    parser.add_argument(
        '--confirm',
        action='store_true',
        help='Send passing barcodes for simulated server confirmation'
    )

    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: LOG_LEVEL env or INFO)'
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.check_digit is not None:
        try:
            print(calculate_check_digit(args.check_digit))
        except InvalidInputError as exc:
            print(json.dumps({"error": str(exc), "input": args.check_digit}, indent=2))
            return 1
        return 0

    if not args.barcodes:
        parser.error("at least one barcode is required")

    barcodes = [raw if args.no_normalize else normalize_barcode(raw) for raw in args.barcodes]
    results = [validate_barcode(barcode) for barcode in barcodes]
    outputs = [
        build_result_dict(barcode, result, include_components=args.components)
        for barcode, result in zip(barcodes, results)
    ]

    all_valid = all(result.is_valid for result in results)
    if args.confirm:
        all_valid = _confirm(barcodes, outputs) and all_valid

    # Output result
    if args.json:
        payload = outputs[0] if len(outputs) == 1 else outputs
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for raw, barcode, result, out in zip(args.barcodes, barcodes, results, outputs):
            print(format_result(raw, barcode, result))
            if "Confirmed" in out:
                print(f"Server: {out['Server Message']}")
            print()

    return 0 if all_valid else 1


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3
"""
Simple CLI for validating a Royal Mail barcode.

Usage:
    python validate_barcode.py "AB473124829GB"

Output:
    Clean JSON with the verdict and, on failure, the reason
"""

import sys
import json
from pathlib import Path

# Add parent directory to path to import rm_barcode
sys.path.insert(0, str(Path(__file__).parent.parent))

from rm_barcode import validate_to_dict


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: python validate_barcode.py <barcode>")
        print("\nExample:")
        print('  python validate_barcode.py "AB473124829GB"')
        sys.exit(1)

    barcode_data = sys.argv[1]

    try:
        output = validate_to_dict(barcode_data, include_components=True)
    except Exception as e:
        # Output error as JSON for consistency
        error_output = {
            "error": str(e),
            "input": barcode_data
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        sys.exit(1)

    print(json.dumps(output, ensure_ascii=False, indent=2))
    sys.exit(0 if output["Valid"] else 1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Validate build-time contract source metadata descriptors"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from contract_source_metadata.artifacts.loader import validate_metadata_file


def validate(paths):
    """Validate every descriptor and print a report"""
    if not paths:
        print("Usage: validate_metadata.py <descriptor.json> [...]")
        return 2

    print(f"Validating {len(paths)} metadata descriptor(s)...\n")

    all_valid = True
    for path in paths:
        report = validate_metadata_file(path)

        if report["valid"]:
            standards = report["metadata"].get("standards")
            declared = "not declared" if standards is None else f"{len(standards)} standards"
            print(f"  ✅ {path}: {declared}")
        else:
            all_valid = False
            for error in report["errors"]:
                print(f"  ❌ {path}: {error}")

        for warning in report["warnings"]:
            print(f"  ⚠️  {path}: {warning}")

    print()
    if all_valid:
        print("✅ All descriptors valid!")
        return 0
    else:
        print("❌ Some descriptors failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate(sys.argv[1:]))

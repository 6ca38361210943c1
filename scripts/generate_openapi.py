#!/usr/bin/env python3
"""Export the badgehub OpenAPI schema to a JSON file.

Usage:
    python scripts/generate_openapi.py
    python scripts/generate_openapi.py --output docs/openapi.json
    python scripts/generate_openapi.py --compact
"""

import argparse
import json
import sys
from pathlib import Path

# Add src to path so badgehub is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Export badgehub OpenAPI schema to a JSON file"
    )
    parser.add_argument(
        "--output",
        "-o",
        default="openapi_schema.json",
        help="Output file path (default: openapi_schema.json)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write compact JSON without indentation",
    )
    args = parser.parse_args()

    indent = None if args.compact else 2

    print("=== badgehub OpenAPI Schema Export ===\n")

    try:
        from badgehub.main import app  # noqa: PLC0415

        schema = app.openapi()
        info = schema.get("info", {})
        paths = schema.get("paths", {})
        print(f"Title:   {info.get('title', 'N/A')}")
        print(f"Version: {info.get('version', 'N/A')}")
        for path in sorted(paths):
            print(f"  {path}")

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=indent, ensure_ascii=False)
            f.write("\n")

        print(f"\nOpenAPI schema exported to: {output_path}")

    except ImportError as e:
        print(f"\nImport error: {e}")
        print("  Make sure dependencies are installed: pip install -e .")
        sys.exit(1)


if __name__ == "__main__":
    main()

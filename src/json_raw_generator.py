"""Convert a documentation tree to the JSON-RAW format for third-party tools.

The input is a JSON or YAML file mapping fully-qualified class names to class
metadata. The output is a single `api.json` with one simplified entry per class.
"""

import argparse
from pathlib import Path

from src.run_export import run_export


def main() -> int:
    """Run the export process."""
    ap = argparse.ArgumentParser(
        description="Export a documentation tree as JSON for third-party tools.",
    )
    ap.add_argument(
        "api_file",
        type=Path,
        help="JSON or YAML file mapping class names to documentation nodes",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated JSON file",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--filename",
        help="Name of the generated file (default: api.json)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress messages",
    )
    args = ap.parse_args()
    return run_export(args)


if __name__ == "__main__":
    raise SystemExit(main())

"""Logic for loading a documentation tree from disk."""

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = {".yml", ".yaml"}


def load_api_tree(path: Path) -> dict[str, Any]:
    """Load a documentation tree (class name -> class node) from JSON or YAML."""
    if not path.is_file():
        msg = f"Documentation tree not found: {path}"
        raise SystemExit(msg)

    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        doc = yaml.safe_load(raw) or {}
    else:
        doc = json.loads(raw)

    if not isinstance(doc, dict):
        msg = f"Expected a mapping of class names in {path}, got {type(doc).__name__}"
        raise SystemExit(msg)
    return doc

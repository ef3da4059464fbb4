"""Logic for writing the exported tree to disk."""

import json
from pathlib import Path
from typing import Any

DEFAULT_FILENAME = "api.json"


def write_api_json(
    data: dict[str, Any],
    out_dir: Path,
    filename: str = DEFAULT_FILENAME,
    indent: int | None = 2,
    *,
    sort_keys: bool = False,
) -> Path:
    """Serialize the exported tree as JSON into out_dir and return the file path."""
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / filename
    out_file.write_text(
        json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False),
        encoding="utf-8",
    )
    return out_file

"""Logic for exporting code examples."""

from typing import Any

from src.models import ABSENT, ExportedExample


def export_examples(api: dict[str, Any]) -> list[ExportedExample]:
    """Export the examples field as description/code pairs."""
    return [
        ExportedExample(
            description=example.get("title", ABSENT),
            code=example.get("example", ABSENT),
        )
        for example in api.get("examples") or []
    ]

"""Logic for exporting deprecation metadata."""

from typing import Any

from src.models import ABSENT, ExportedDeprecation


def export_deprecated(api: dict[str, Any]) -> ExportedDeprecation | None:
    """Export the deprecated field, or None if the node is not deprecated.

    `since` and `removed` are copied through as-is.
    """
    if "deprecated" in api and api["deprecated"]:
        deprecated = api["deprecated"]
        return ExportedDeprecation(
            notes=deprecated.get("notes") or "",
            since=deprecated.get("since", ABSENT),
            removed=deprecated.get("removed", ABSENT),
        )
    return None

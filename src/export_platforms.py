"""Logic for exporting platform availability."""

from typing import Any

from src.models import ExportedPlatform


def export_platforms(api: dict[str, Any]) -> list[ExportedPlatform]:
    """Export the since mapping as a list of platforms, in mapping order."""
    since = api.get("since") or {}
    return [
        ExportedPlatform(since=version, name=platform)
        for platform, version in since.items()
    ]

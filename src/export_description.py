"""Logic for exporting the description text of an API node."""

from typing import Any


def export_description(api: dict[str, Any]) -> str | None:
    """Return the node description, or None when it has none."""
    if "description" in api and api["description"]:
        return api["description"]
    return None

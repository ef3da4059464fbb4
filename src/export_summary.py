"""Logic for exporting the summary text of an API node."""

from typing import Any


def export_summary(api: dict[str, Any]) -> str:
    """Return the node summary, or an empty string when it has none."""
    rv = ""
    if "summary" in api and api["summary"]:
        rv = api["summary"]
    return rv

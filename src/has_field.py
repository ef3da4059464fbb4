"""Predicate for checking whether an API node carries a usable field."""

from typing import Any


def has_field(api: dict[str, Any], key: str) -> bool:
    """Check that the key is present on the node and its value is truthy."""
    return key in api and bool(api[key])

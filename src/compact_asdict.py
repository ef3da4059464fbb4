"""Logic for serializing export models into plain JSON-ready dicts."""

import copy
from dataclasses import fields, is_dataclass
from typing import Any

from src.models import ABSENT


def compact_asdict(obj: Any) -> Any:
    """Convert a dataclass tree to dicts, omitting fields that are ABSENT.

    None values are kept as JSON nulls. Values copied verbatim from the
    source tree are deep-copied, so the result never shares mutable state
    with the input.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: compact_asdict(getattr(obj, f.name))
            for f in fields(obj)
            if getattr(obj, f.name) is not ABSENT
        }
    if isinstance(obj, list):
        return [compact_asdict(v) for v in obj]
    return copy.deepcopy(obj)

"""Data models for the exported JSON-RAW tree.

Optional fields default to `ABSENT` when the source node has no data for them.
They are dropped on serialization (see `compact_asdict`), so an absent key
always means "no data". A None value is a real null copied from the source
and is kept.
"""

from dataclasses import dataclass, field
from typing import Any


class _Absent:
    """Marker for a field that has no data."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Any = _Absent()


@dataclass
class ExportedDeprecation:
    """Deprecation notice of a class, member or parameter."""

    notes: str = ""
    since: Any = ABSENT
    removed: Any = ABSENT


@dataclass
class ExportedExample:
    """A titled code example."""

    description: Any = ABSENT
    code: Any = ABSENT


@dataclass
class ExportedPlatform:
    """A platform and the version that introduced the API there."""

    since: Any = ABSENT
    name: Any = ABSENT


@dataclass
class ExportedReturn:
    """One possible return value of a method."""

    summary: Any = ABSENT
    type: Any = ABSENT


@dataclass
class ExportedParam:
    """A method parameter or an event property."""

    name: Any = ABSENT
    deprecated: Any = ABSENT
    summary: str = ""
    description: Any = ABSENT
    type: Any = "String"
    optional: Any = ABSENT  # parameters only


@dataclass
class ExportedMember:
    """A method, property or event of a class."""

    name: Any = ABSENT
    deprecated: Any = ABSENT
    summary: str = ""
    description: Any = ABSENT
    platforms: list[ExportedPlatform] = field(default_factory=list)
    inherits: Any = ABSENT
    # events
    properties: Any = ABSENT
    # methods and properties
    examples: Any = ABSENT
    # methods
    parameters: Any = ABSENT
    returns: Any = ABSENT
    # properties
    type: Any = ABSENT
    availability: Any = ABSENT
    default: Any = ABSENT
    optional: Any = ABSENT
    permission: Any = ABSENT
    value: Any = ABSENT


@dataclass
class ExportedClass:
    """A documented class (type, module or proxy)."""

    name: Any = ABSENT
    summary: str = ""
    extends: Any = "Object"
    platforms: list[ExportedPlatform] = field(default_factory=list)
    type: Any = "object"
    deprecated: Any = ABSENT
    description: Any = ABSENT
    events: Any = ABSENT
    examples: Any = ABSENT
    methods: Any = ABSENT
    properties: Any = ABSENT
    subtype: Any = ABSENT

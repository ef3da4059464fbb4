"""Logic for exporting the events, methods or properties of a class."""

from typing import Any

from src.export_deprecated import export_deprecated
from src.export_description import export_description
from src.export_examples import export_examples
from src.export_params import export_params
from src.export_platforms import export_platforms
from src.export_return_types import export_return_types
from src.export_summary import export_summary
from src.has_field import has_field
from src.models import ABSENT, ExportedMember

EVENT_CLASS = "Titanium.Event"

# Property fields copied through without transformation
PASSTHROUGH_PROPERTY_FIELDS = (
    "availability",
    "default",
    "optional",
    "permission",
    "value",
)


def export_apis(
    api: dict[str, Any],
    kind: str,
    apis: dict[str, Any] | None = None,
    event_class: str = EVENT_CLASS,
) -> list[ExportedMember]:
    """Export one member list ("events", "methods" or "properties") of a class.

    `apis` is the whole documentation tree. It is only read, to append the
    properties of the common event class to every event's own properties.
    Hidden members and accessors are skipped; order is preserved.
    """
    rv: list[ExportedMember] = []
    if kind not in api:
        return rv

    for member in api[kind] or []:
        if member.get("__hide") or member.get("__accessor"):
            continue

        exported = ExportedMember(name=member.get("name", ABSENT))
        if has_field(member, "deprecated"):
            exported.deprecated = export_deprecated(member)
        exported.summary = export_summary(member)
        if has_field(member, "description"):
            exported.description = export_description(member)
        exported.platforms = export_platforms(member)
        inherits = member.get("__inherits", ABSENT)
        if inherits != api.get("name", ABSENT):
            exported.inherits = inherits

        if kind == "events":
            _export_event(member, exported, apis or {}, event_class)
        elif kind == "methods":
            _export_method(member, exported)
        elif kind == "properties":
            _export_property(member, exported)

        rv.append(exported)
    return rv


def _export_event(
    member: dict[str, Any],
    exported: ExportedMember,
    apis: dict[str, Any],
    event_class: str,
) -> None:
    # An empty list still receives the common event properties
    if member.get("properties") is None:
        return
    properties = list(member["properties"])
    if event_class in apis:
        properties.extend(apis[event_class].get("properties") or [])
    exported.properties = export_params(properties, "properties")


def _export_method(member: dict[str, Any], exported: ExportedMember) -> None:
    if has_field(member, "examples"):
        exported.examples = export_examples(member)
    if has_field(member, "parameters"):
        exported.parameters = export_params(member["parameters"], "parameters")
    exported.returns = export_return_types(member)


def _export_property(member: dict[str, Any], exported: ExportedMember) -> None:
    if has_field(member, "examples"):
        exported.examples = export_examples(member)
    exported.type = member.get("type") or "String"
    for key in PASSTHROUGH_PROPERTY_FIELDS:
        if has_field(member, key):
            setattr(exported, key, member[key])

"""Export a documentation tree as simplified JSON for third-party tools."""

import contextlib
import logging
from typing import Any

from src.compact_asdict import compact_asdict
from src.export_apis import EVENT_CLASS, export_apis
from src.export_deprecated import export_deprecated
from src.export_description import export_description
from src.export_examples import export_examples
from src.export_platforms import export_platforms
from src.export_summary import export_summary
from src.has_field import has_field
from src.models import ABSENT, ExportedClass

logger = logging.getLogger(__name__)

# Class types that are exported as `type: object` plus a `subtype`
SUBTYPES = ("proxy", "view")


def export_class(
    cls: dict[str, Any],
    apis: dict[str, Any],
    event_class: str = EVENT_CLASS,
) -> ExportedClass:
    """Export a single class of the documentation tree."""
    exported = ExportedClass(
        name=cls.get("name", ABSENT),
        summary=export_summary(cls),
        extends=cls.get("extends") or "Object",
        platforms=export_platforms(cls),
        type=cls.get("__subtype") or "object",
    )
    # Avoid null and empty values to keep the output small
    if has_field(cls, "deprecated"):
        exported.deprecated = export_deprecated(cls)
    if has_field(cls, "description"):
        exported.description = export_description(cls)
    if has_field(cls, "events"):
        exported.events = export_apis(cls, "events", apis, event_class)
    if has_field(cls, "examples"):
        exported.examples = export_examples(cls)
    if has_field(cls, "methods"):
        exported.methods = export_apis(cls, "methods", apis, event_class)
    if has_field(cls, "properties"):
        exported.properties = export_apis(cls, "properties", apis, event_class)
    if exported.type in SUBTYPES:
        exported.subtype = exported.type
        exported.type = "object"
    return exported


def export_data(
    apis: dict[str, Any],
    event_class: str = EVENT_CLASS,
) -> dict[str, dict[str, Any]]:
    """Annotate the documentation tree for consumption by third-party tools.

    Returns a mapping with the same keys as `apis` whose values are plain,
    JSON-serializable dicts. The input tree is not modified.
    """
    # A failing log sink must not stop the export
    with contextlib.suppress(Exception):
        logger.info("JSON-RAW generator starting...")
    rv: dict[str, dict[str, Any]] = {}
    for class_name, cls in apis.items():
        rv[class_name] = compact_asdict(export_class(cls, apis, event_class))
    return rv

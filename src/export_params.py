"""Logic for exporting method parameters and event properties."""

from typing import Any

from src.export_deprecated import export_deprecated
from src.export_description import export_description
from src.export_summary import export_summary
from src.has_field import has_field
from src.models import ABSENT, ExportedParam


def export_params(apis: list[dict[str, Any]] | None, kind: str) -> list[ExportedParam]:
    """Export a list of parameters (kind "parameters") or properties.

    Only parameters carry the `optional` flag.
    """
    rv: list[ExportedParam] = []
    for member in apis or []:
        param = ExportedParam(name=member.get("name", ABSENT))
        if has_field(member, "deprecated"):
            param.deprecated = export_deprecated(member)
        param.summary = export_summary(member)
        if has_field(member, "description"):
            param.description = export_description(member)
        param.type = member.get("type") or "String"
        if kind == "parameters":
            param.optional = member.get("optional") or False
        rv.append(param)
    return rv

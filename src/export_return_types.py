"""Logic for exporting method return types."""

from typing import Any

from src.has_field import has_field
from src.models import ABSENT, ExportedReturn


def export_return_types(api: dict[str, Any]) -> ExportedReturn | list[ExportedReturn]:
    """Export the returns field of a method.

    A method without returns is `void`. A single return type is exported as
    one object, several as a list.
    """
    rv: list[ExportedReturn] = []
    if has_field(api, "returns"):
        returns = api["returns"]
        if not isinstance(returns, list):
            returns = [returns]
        for ret in returns:
            x = ExportedReturn(type=ret.get("type", ABSENT))
            if has_field(ret, "summary"):
                x.summary = ret["summary"]
            rv.append(x)
    else:
        rv.append(ExportedReturn(type="void"))
    if len(rv) == 1:
        return rv[0]
    return rv

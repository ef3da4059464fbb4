"""Tests for the top-level documentation tree export."""

import copy
import json
import logging
from typing import Any

import pytest

from src.export_data import export_data


def _tree() -> dict[str, Any]:
    return {
        "Titanium.Event": {
            "name": "Titanium.Event",
            "summary": "The base for all Titanium events.",
            "since": {"android": "0.8", "iphone": "0.8"},
            "properties": [
                {"name": "source", "type": "Object", "__inherits": "Titanium.Event"},
            ],
        },
        "Titanium.UI.Button": {
            "name": "Titanium.UI.Button",
            "summary": "A button widget.",
            "description": "Buttons have many states.",
            "extends": "Titanium.UI.View",
            "since": {"android": "0.8"},
            "__subtype": "view",
            "examples": [{"title": "Simple", "example": "Ti.UI.createButton();"}],
            "events": [
                {
                    "name": "click",
                    "__inherits": "Titanium.UI.View",
                    "properties": [{"name": "x", "type": "Number"}],
                }
            ],
            "methods": [
                {"name": "A", "__inherits": "Titanium.UI.Button"},
                {"name": "B", "__inherits": "Titanium.UI.Button", "__hide": True},
                {
                    "name": "C",
                    "__inherits": "Titanium.UI.Button",
                    "returns": {"type": "String"},
                },
            ],
            "properties": [{"name": "title", "__inherits": "Titanium.UI.Button"}],
        },
    }


def test_minimal_class_has_exact_keys() -> None:
    """Verify a class with no optional data exports only the required keys."""
    out = export_data({"Foo": {"name": "Foo", "summary": "S"}})
    assert out == {
        "Foo": {
            "name": "Foo",
            "summary": "S",
            "extends": "Object",
            "platforms": [],
            "type": "object",
        }
    }


def test_full_class() -> None:
    """Verify a class with events, methods, properties and examples."""
    button = export_data(_tree())["Titanium.UI.Button"]
    assert button["name"] == "Titanium.UI.Button"
    assert button["extends"] == "Titanium.UI.View"
    assert button["description"] == "Buttons have many states."
    assert button["type"] == "object"
    assert button["subtype"] == "view"
    assert button["examples"] == [
        {"description": "Simple", "code": "Ti.UI.createButton();"}
    ]
    assert [m["name"] for m in button["methods"]] == ["A", "C"]
    assert button["methods"][0]["returns"] == {"type": "void"}
    assert button["methods"][1]["returns"] == {"type": "String"}
    (click,) = button["events"]
    assert click["inherits"] == "Titanium.UI.View"
    assert [p["name"] for p in click["properties"]] == ["x", "source"]
    assert button["properties"] == [
        {"name": "title", "summary": "", "platforms": [], "type": "String"}
    ]
    assert "deprecated" not in button


@pytest.mark.parametrize("subtype", ["proxy", "view"])
def test_subtype_rewrite(subtype: str) -> None:
    """Verify that proxy and view classes become objects with a subtype."""
    out = export_data({"Foo": {"name": "Foo", "__subtype": subtype}})["Foo"]
    assert out["type"] == "object"
    assert out["subtype"] == subtype


def test_other_subtype_untouched() -> None:
    """Verify that other subtypes stay as the type with no subtype key."""
    out = export_data({"Foo": {"name": "Foo", "__subtype": "module"}})["Foo"]
    assert out["type"] == "module"
    assert "subtype" not in out


def test_deprecated_class() -> None:
    """Verify that class deprecation is exported."""
    cls = {"name": "Foo", "deprecated": {"since": "1.0", "removed": "2.0"}}
    out = export_data({"Foo": cls})["Foo"]
    assert out["deprecated"] == {"notes": "", "since": "1.0", "removed": "2.0"}


def test_empty_member_lists_omitted() -> None:
    """Verify that empty member lists are not emitted."""
    cls = {"name": "Foo", "methods": [], "events": [], "examples": []}
    out = export_data({"Foo": cls})["Foo"]
    assert "methods" not in out
    assert "events" not in out
    assert "examples" not in out


def test_missing_name_is_omitted() -> None:
    """Verify that a class without a name is exported without raising."""
    out = export_data({"Foo": {"summary": "No name"}})["Foo"]
    assert "name" not in out
    assert out["summary"] == "No name"


def test_keys_and_order_preserved() -> None:
    """Verify that output keys follow the input tree order."""
    out = export_data(_tree())
    assert list(out) == ["Titanium.Event", "Titanium.UI.Button"]


def test_deterministic_for_equal_trees() -> None:
    """Verify that two structurally equal trees export identically."""
    assert export_data(_tree()) == export_data(_tree())


def test_input_not_mutated() -> None:
    """Verify that the input tree is unchanged by the export."""
    tree = _tree()
    before = copy.deepcopy(tree)
    export_data(tree)
    assert tree == before


def test_output_is_independent_copy() -> None:
    """Verify that the output does not share mutable values with the input."""
    tree = {
        "Foo": {
            "name": "Foo",
            "properties": [{"name": "p", "__inherits": "Foo", "value": {"k": 1}}],
        }
    }
    out = export_data(tree)
    out["Foo"]["properties"][0]["value"]["k"] = 2
    assert tree["Foo"]["properties"][0]["value"] == {"k": 1}


def test_output_is_json_serializable() -> None:
    """Verify that the export can be serialized without conversion."""
    assert json.loads(json.dumps(export_data(_tree()))) == export_data(_tree())


def test_custom_event_class() -> None:
    """Verify that the common event class name can be overridden."""
    tree = _tree()
    tree["My.Event"] = tree.pop("Titanium.Event")
    out = export_data(tree, event_class="My.Event")["Titanium.UI.Button"]
    assert [p["name"] for p in out["events"][0]["properties"]] == ["x", "source"]


def test_logs_start_message(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that the export announces its start."""
    with caplog.at_level(logging.INFO, logger="src.export_data"):
        export_data({})
    assert "JSON-RAW generator starting..." in caplog.text


class _FailingHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        raise RuntimeError("log sink unavailable")


def test_failing_log_handler_does_not_stop_export(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that a log handler raising on emit does not abort the export."""
    handler = _FailingHandler()
    export_logger = logging.getLogger("src.export_data")
    export_logger.addHandler(handler)
    try:
        with caplog.at_level(logging.INFO, logger="src.export_data"):
            out = export_data({"A": {"name": "A"}})
    finally:
        export_logger.removeHandler(handler)
    assert out["A"]["name"] == "A"

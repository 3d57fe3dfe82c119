"""
Tests for serialization of compiled forms.

Serialized output is what gets handed to templates, so it must be
stable and must survive a JSON or YAML round-trip.
"""

import json

import yaml
from formdef.compiler import compile_form
from formdef.field_types import FieldType
from formdef.forms import Form, FormField
from formdef.loader import parse_form_dict
from formdef.serialization import (
    form_from_json,
    form_from_yaml,
    form_to_dict,
    form_to_json,
    form_to_yaml,
)


def build_sample_form() -> Form:
    doc = parse_form_dict({
        "name": "bulkadd",
        "options": {"title": "Bulk Add"},
        "fields": {
            "!section(Members)": {},
            "!repeat(0, 1)": {
                "fname": {"type": "text", "label": "First name"},
                "row": {"type": "hidden", "options": {"value": "!bind(repeater)"}},
            },
        },
    }, "Profile")
    return compile_form(doc, "doBulkAdd")


def test_form_to_dict_shape():
    d = form_to_dict(build_sample_form())
    assert d["name"] == "bulkadd"
    assert d["module"] == "Profile"
    assert d["action"] == "doBulkAdd"
    assert d["options"] == {"title": "Bulk Add"}
    assert [f["type"] for f in d["fields"]] == ["section", "text", "hidden", "text", "hidden"]
    assert d["fields"][2] == {"name": "row0", "type": "hidden", "options": {"options": {"value": "0"}}}


def test_json_is_stable():
    first = form_to_json(build_sample_form())
    second = form_to_json(build_sample_form())
    assert first == second
    assert json.loads(first)["fields"][1]["name"] == "fname0"


def test_json_roundtrip():
    form = build_sample_form()
    restored = form_from_json(form_to_json(form))
    assert form_to_dict(restored) == form_to_dict(form)
    assert restored.fields[0].type is FieldType.SECTION


def test_yaml_roundtrip():
    form = build_sample_form()
    text = form_to_yaml(form)
    assert yaml.safe_load(text)["action"] == "doBulkAdd"
    assert form_to_dict(form_from_yaml(text)) == form_to_dict(form)


def test_field_types_serialize_by_name():
    form = Form(name="f", module="M", action="a")
    form.add_field(FormField(name="when", type=FieldType.DATETIME))
    assert form_to_dict(form)["fields"] == [{"name": "when", "type": "datetime", "options": {}}]

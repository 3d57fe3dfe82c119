"""
Test the example bulk-add form.

Validates that the example definition compiles to the expected section
header and repeated member rows.
"""

import json

from formdef.compiler import section_header_name
from formdef.examples import (
    MEMBER_FIELDS,
    build_example_bulk_add_form,
    example_bulk_add_json,
)
from formdef.field_types import FieldType
from formdef.loader import parse_form_string


def test_example_bulk_add_structure():
    form = build_example_bulk_add_form(rows=3)

    # header + intro, then 3 rows * (row + 5 member fields)
    assert len(form.fields) == 2 + 3 * 6
    assert form.fields[0].name == section_header_name("New members")
    assert form.fields[0].type is FieldType.SECTION

    row2 = form.get_field("row2")
    assert row2.type is FieldType.HIDDEN
    assert row2.options["options"]["value"] == "2"

    college = form.get_field("collegeid0")
    assert college.type is FieldType.SELECT
    assert college.options["options"]["options"][0]["text"] == "Alcuin"

    for i in range(3):
        for base in MEMBER_FIELDS:
            assert form.get_field(f"{base}{i}") is not None


def test_example_json_parses():
    doc = parse_form_string(example_bulk_add_json(rows=2), "Profile")
    assert doc.name == "bulkadd"
    assert doc.fields[1].end == 1
    assert json.loads(example_bulk_add_json())["action"] == "doBulkAdd"

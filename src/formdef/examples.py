"""
Example form definition for adding several members at once.

Builds a "bulk add" form: an introductory section followed by a block of
member fields repeated once per row, each row's hidden "row" field bound
to its repeat index.
"""
import json
from typing import Any, Dict

from formdef.compiler import compile_form
from formdef.forms import Form
from formdef.loader import parse_form_dict

MEMBER_FIELDS = ["fname", "sname", "eduroam", "sex", "collegeid"]


def example_bulk_add_definition(rows: int = 5) -> Dict[str, Any]:
    return {
        "name": "bulkadd",
        "module": "Profile",
        "action": "doBulkAdd",
        "options": {"title": "Bulk Add Members"},
        "fields": {
            "!section(New members)": {
                "intro": {
                    "type": "blocktext",
                    "label": "",
                    "options": {"text": "Enter one member per row."},
                },
            },
            f"!repeat(0, {rows - 1})": {
                "row": {"type": "hidden", "label": "", "options": {"value": "!bind(repeater)"}},
                "fname": {"type": "text", "label": "First name"},
                "sname": {"type": "text", "label": "Surname"},
                "eduroam": {
                    "type": "text",
                    "label": "Eduroam",
                    "options": {"required": False, "explanation": "!bind(eduroam_hint)"},
                },
                "sex": {
                    "type": "select",
                    "label": "Gender",
                    "options": {"options": [
                        {"value": "m", "text": "Male"},
                        {"value": "f", "text": "Female"},
                        {"value": "o", "text": "Other"},
                    ]},
                },
                "collegeid": {
                    "type": "select",
                    "label": "College",
                    "options": {"options": "!bind(colleges)"},
                },
            },
        },
    }


def example_bulk_add_json(rows: int = 5) -> str:
    return json.dumps(example_bulk_add_definition(rows), indent=2)


def build_example_bulk_add_form(rows: int = 5) -> Form:
    document = parse_form_dict(example_bulk_add_definition(rows), module="Profile")
    bindings = {
        "eduroam_hint": "The part before @york.ac.uk",
        "colleges": [
            {"value": 1, "text": "Alcuin"},
            {"value": 2, "text": "Derwent"},
            {"value": 3, "text": "Vanbrugh"},
        ],
    }
    return compile_form(document, "doBulkAdd", bindings)

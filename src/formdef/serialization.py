"""
Serialization helpers for compiled forms.

Provides JSON/YAML rendering via an intermediate dict representation,
for handing compiled forms to a template layer and for comparing the
output of two compiles.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from formdef.field_types import FieldType
from formdef.forms import Form, FormField


def field_to_dict(f: FormField) -> Dict[str, Any]:
    return {"name": f.name, "type": f.type.name.lower(), "options": f.options}


def field_from_dict(d: Dict[str, Any]) -> FormField:
    return FormField(name=d["name"], type=FieldType[d["type"].upper()], options=d.get("options", {}))


def form_to_dict(form: Form) -> Dict[str, Any]:
    return {
        "name": form.name,
        "module": form.module,
        "action": form.action,
        "options": form.options,
        "fields": [field_to_dict(f) for f in form.fields],
    }


def form_from_dict(d: Dict[str, Any]) -> Form:
    form = Form(
        name=d["name"],
        module=d.get("module", ""),
        action=d.get("action", ""),
        options=d.get("options", {}),
    )
    for f in d.get("fields", []):
        form.add_field(field_from_dict(f))
    return form


def form_to_json(form: Form) -> str:
    return json.dumps(form_to_dict(form), sort_keys=True)


def form_from_json(s: str) -> Form:
    return form_from_dict(json.loads(s))


def form_to_yaml(form: Form) -> str:
    return yaml.safe_dump(form_to_dict(form))


def form_from_yaml(s: str) -> Form:
    return form_from_dict(yaml.safe_load(s))

"""
Default form and field objects.

The compiler builds forms through two factories:
    form_factory(name, module, action, options)  -> object with add_field()
    field_factory(name, type, options)           -> field object

Form and FormField below are the default implementations. Applications
with their own form layer pass their own factories to FormCompiler.

IMPORTANT:
    The compiler only appends fields. It never reads a form back.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from formdef.field_types import FieldType


@dataclass
class FormField:
    """
    A single concrete field.

    Properties:
        name: Unique field name within the form (e.g. "fname0")
        type: FieldType constant
        options: Construction options with all bindings resolved
            (label, nested "options", etc.)
    """

    name: str
    type: FieldType
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> Optional[str]:
        return self.options.get("label")


@dataclass
class Form:
    """
    An ordered collection of fields, ready for rendering.

    Properties:
        name: Form identifier
        module: Owning module
        action: Action triggered on submission
        options: Form-level options, as declared in the definition
        fields: Fields in the order they were added
    """

    name: str
    module: str
    action: str
    options: Dict[str, Any] = field(default_factory=dict)
    fields: List[FormField] = field(default_factory=list)

    def add_field(self, form_field: FormField) -> "Form":
        self.fields.append(form_field)
        return self

    def get_field(self, name: str) -> Optional[FormField]:
        """
        Retrieve a field by name.

        Returns:
            FormField or None if not found
        """
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


def collect_repeated(values: Dict[str, Any], base_names: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Regroup submitted values of a !repeat block into one record per index.

    A repeat block over fields fname, sname produces fields named
    fname0, sname0, fname1, sname1, ...; this reverses that naming.

    Example:
        collect_repeated(
            {"fname0": "Ann", "sname0": "Lee", "fname1": "Bo", "sname1": "Ng"},
            ["fname", "sname"],
        )
        → [{"fname": "Ann", "sname": "Lee"}, {"fname": "Bo", "sname": "Ng"}]

    Args:
        values: Submitted values keyed by field name
        base_names: Field names as declared inside the repeat block

    Returns:
        Records ordered by repeat index. Keys that don't belong to any
        base name are ignored.
    """
    # Longest first, so "name" doesn't claim "name_full0"
    bases = sorted(set(base_names), key=len, reverse=True)
    rows: Dict[int, Dict[str, Any]] = {}

    for key, value in values.items():
        for base in bases:
            if key.startswith(base) and re.fullmatch(r"[0-9]+", key[len(base):]):
                rows.setdefault(int(key[len(base):]), {})[base] = value
                break

    return [rows[i] for i in sorted(rows)]

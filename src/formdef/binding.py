"""
Variable binding for field option mappings.

A string value of the form "!bind(name)" is replaced by the value bound
to `name` at compile time:

    {"options": {"value": "!bind(repeater)"}}  with  {"repeater": "2"}
    → {"options": {"value": "2"}}

Nested mappings and lists are always walked, including values that were
just substituted in. Strings that start with "!" but are not a bind
reference pass through unchanged.
"""

import re
from typing import Any, Dict

from formdef.errors import CompileError

BIND_PREFIX = "!"

_BIND_RE = re.compile(r"^!bind\(\s*(\w+)\s*\)$")


def _bind_value(value: Any, bindings: Dict[str, Any]) -> Any:
    if isinstance(value, str) and value.startswith(BIND_PREFIX):
        match = _BIND_RE.match(value)
        if match:
            var = match.group(1)
            if var not in bindings:
                raise CompileError(f"Tried to !bind to unbound form variable: {var}.")
            value = bindings[var]

    if isinstance(value, dict):
        return bind_options(value, bindings)
    if isinstance(value, list):
        return [_bind_value(item, bindings) for item in value]
    return value


def bind_options(options: Dict[str, Any], bindings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Substitute !bind(...) references throughout an option mapping.

    Args:
        options: Field description mapping (not modified)
        bindings: Variable name → value

    Returns:
        A new mapping with all references replaced

    Raises:
        CompileError: If a reference names a variable with no binding
    """
    return {key: _bind_value(value, bindings) for key, value in options.items()}

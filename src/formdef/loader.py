"""
Form Definition Loader (Raw JSON → FormDocument).

Reads declarative form definitions and classifies every field entry.

JSON Format:
    {
      "name": "form_name",
      "module": "module_name",
      "action": "form_completion_action",
      "options": { ... },
      "fields": {
        "field_name": {
          "type": "type name, case insensitive",
          "label": "etc etc",
          "options": { ... }
        },
        "!section(Heading)": { ...fields... },
        "!repeat(0, 4)": { ...fields... }
      }
    }

Syntax Notes:
    - Keys starting with "!" are directives, everything else is a field
    - Directive arguments tolerate whitespace: "!repeat( 0 , 4 )"
    - "module" and "action" in the source are informational; the caller
      supplies both
"""

import json
import logging
import re
import warnings
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from formdef.config import Settings, load_settings
from formdef.errors import CompileError, ParseError
from formdef.model import FieldNode, FormDocument, LeafNode, RepeatNode, SectionNode

logger = logging.getLogger(__name__)

SPECIAL_PREFIX = "!"

_REPEAT_RE = re.compile(r"^!repeat\(\s*([0-9]+)\s*,\s*([0-9]+)\s*\)$")
_SECTION_RE = re.compile(r"^!section\((.*)\)$")


def is_directive(name: str) -> bool:
    return name.startswith(SPECIAL_PREFIX)


def parse_directive(name: str, body: Dict[str, Any]) -> FieldNode:
    """
    Classify a directive key and parse its body.

    The directive keyword decides the node kind; the keywords are
    distinct, so at most one grammar can apply.

    Args:
        name: Directive key, e.g. "!repeat(1, 3)"
        body: The mapping of child field entries

    Returns:
        SectionNode or RepeatNode

    Raises:
        CompileError: If the key matches no directive grammar
        ParseError: If the body is malformed
    """
    repeat = _REPEAT_RE.match(name)
    if repeat:
        return RepeatNode(
            name=name,
            start=int(repeat.group(1)),
            end=int(repeat.group(2)),
            body=_parse_field_entries(body, context=name),
        )

    section = _SECTION_RE.match(name)
    if section:
        return SectionNode(
            name=name,
            label=section.group(1),
            body=_parse_field_entries(body, context=name),
        )

    raise CompileError(f"Illegal special field name: {name}.")


def _parse_field_entries(entries: Any, context: str) -> tuple:
    if not isinstance(entries, dict):
        raise ParseError(f"Expected an object of fields in {context}, got {type(entries).__name__}")

    nodes: List[FieldNode] = []
    for name, description in entries.items():
        if not isinstance(description, dict):
            raise ParseError(
                f"Field '{name}' in {context} must be an object, got {type(description).__name__}"
            )
        if is_directive(name):
            nodes.append(parse_directive(name, description))
        else:
            nodes.append(LeafNode(name=name, attributes=description))
    return tuple(nodes)


def parse_form_dict(data: Any, module: str) -> FormDocument:
    """
    Build a FormDocument from already decoded JSON data.

    Args:
        data: Decoded definition (must be a dict)
        module: Name of the calling module

    Returns:
        FormDocument

    Raises:
        ParseError: If the definition has the wrong shape
        CompileError: If a directive key is not recognised
    """
    if not isinstance(data, dict):
        raise ParseError(f"Form definition must be a JSON object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str):
        raise ParseError("Form definition is missing a string 'name'")

    options = data.get("options", {})
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise ParseError(f"Form '{name}' has non-object 'options'")

    if "fields" not in data:
        raise ParseError(f"Form '{name}' has no 'fields'")
    fields = _parse_field_entries(data["fields"], context=f"form '{name}'")

    declared_module = data.get("module")
    if declared_module is not None and declared_module != module:
        warnings.warn(
            f"Form '{name}' declares module '{declared_module}' but was loaded by '{module}'",
            UserWarning,
        )

    return FormDocument(
        name=name,
        module=module,
        options=options,
        fields=fields,
        declared_module=declared_module,
        declared_action=data.get("action"),
    )


def parse_form_string(source: str, module: str) -> FormDocument:
    """
    Parse JSON text into a FormDocument.

    Args:
        source: JSON text
        module: Name of the calling module

    Returns:
        FormDocument

    Raises:
        ParseError: If the text is not valid JSON or has the wrong shape
        CompileError: If a directive key is not recognised
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Failed to load form from JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            lineno=e.lineno,
            colno=e.colno,
        ) from e

    return parse_form_dict(data, module)


def parse_form_file(path: Union[str, Path], module: str) -> FormDocument:
    """
    Read and parse a form definition file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ParseError: If the file is not UTF-8 or parsing fails
    """
    path = Path(path)
    logger.debug("Loading form definition from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Form definition not found: {path}")
    except UnicodeDecodeError as e:
        raise ParseError(f"Form definition {path} is not valid UTF-8: {e}") from e

    return parse_form_string(content, module)


def form_path(module: str, name: str, settings: Optional[Settings] = None) -> Path:
    """Location of a module's form definition: <app_root>/Models/<module>/<name>.json."""
    settings = settings or load_settings()
    return settings.app_root / settings.forms_dir / module / f"{name}{settings.form_suffix}"


def load_form_document(module: str, name: str, settings: Optional[Settings] = None) -> FormDocument:
    """
    Load a form by its module and logical name.

    Args:
        module: Name of the calling module
        name: File name of the form, without ".json"
        settings: Optional settings; read from the environment if omitted

    Returns:
        FormDocument
    """
    return parse_form_file(form_path(module, name, settings), module)


__all__ = [
    "SPECIAL_PREFIX",
    "is_directive",
    "parse_directive",
    "parse_form_dict",
    "parse_form_string",
    "parse_form_file",
    "form_path",
    "load_form_document",
]

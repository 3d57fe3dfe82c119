"""
Form Compiler (FormDocument → compiled form).

Expands directive nodes into a flat, ordered list of concrete fields and
appends them to a form built by an injected form factory.

Expansion rules:
    - LeafNode:    one field, type resolved case-insensitively, options bound
    - SectionNode: a "section" header field, then the body (flat)
    - RepeatNode:  the body once per index start..end inclusive, with
                   "repeater" bound to the index and the index appended to
                   every generated field name

Generated names:
    - Section headers are named by base64-encoding the label, which keeps
      them clear of ordinary field names.
    - Fields inside a repeat get the index appended: x → x0, x1, x2.
      Nested repeats append outermost index first.

ARCHITECTURAL RULE:
    A CompileError aborts the whole compile. The partially filled form is
    never returned.
"""

import base64
import copy
import logging
import warnings
from typing import Any, Callable, Dict, Optional, Set

from formdef.binding import bind_options
from formdef.config import Settings
from formdef.errors import CompileError
from formdef.field_types import DEFAULT_TYPES, TypeRegistry
from formdef.forms import Form, FormField
from formdef.loader import load_form_document
from formdef.model import FieldNode, FormDocument, LeafNode, RepeatNode, SectionNode

logger = logging.getLogger(__name__)

REPEATER_VARIABLE = "repeater"


def section_header_name(label: str) -> str:
    """Field name used for a section header: the base64 encoding of its label."""
    return base64.b64encode(label.encode("utf-8")).decode("ascii")


def check_repeat_bounds(node: RepeatNode) -> None:
    if node.start >= node.end:
        raise CompileError(
            f"Start and end wrong way around on !repeat: start={node.start}, end={node.end}."
        )


class FormCompiler:
    """
    Compiles parsed form documents into form objects.

    A compiler holds only its collaborators, so one instance can be
    shared between threads.

    Args:
        types: Registry used to resolve field type names
        form_factory: Called as form_factory(name, module, action, options)
        field_factory: Called as field_factory(name, type, options)
    """

    def __init__(
        self,
        types: TypeRegistry = DEFAULT_TYPES,
        form_factory: Callable[..., Any] = Form,
        field_factory: Callable[..., Any] = FormField,
    ):
        self.types = types
        self.form_factory = form_factory
        self.field_factory = field_factory

    def compile(self, document: FormDocument, action: str, bindings: Optional[Dict[str, Any]] = None):
        """
        Compile a parsed document.

        Args:
            document: Parsed form definition
            action: Name of the action to trigger on submission
            bindings: Names used in !bind directives → values

        Returns:
            The form built by form_factory, with all fields added

        Raises:
            CompileError: On a reversed !repeat range, an unknown field
                type, an unbound variable or a repeated field name
        """
        bindings = dict(bindings or {})

        for node in document.walk():
            if isinstance(node, RepeatNode):
                check_repeat_bounds(node)

        # The form gets its own copy so the parsed document stays untouched
        options = copy.deepcopy(document.options)
        form = self.form_factory(document.name, document.module, action, options)
        seen: Set[str] = set()
        for node in document.fields:
            self.expand(node, form, bindings, seen=seen)

        logger.debug("Compiled form %s/%s for action %s", document.module, document.name, action)
        return form

    def expand(
        self,
        node: FieldNode,
        form,
        bindings: Dict[str, Any],
        suffix: str = "",
        seen: Optional[Set[str]] = None,
    ) -> None:
        """
        Add the field(s) a single node produces to `form`.

        `seen` collects generated names across one compile; a name
        produced twice raises CompileError.
        """
        if seen is None:
            seen = set()
        if isinstance(node, LeafNode):
            self._add_leaf(node.name + suffix, node.attributes, form, bindings, seen)
        elif isinstance(node, SectionNode):
            self._add_section(node, form, bindings, suffix, seen)
        elif isinstance(node, RepeatNode):
            self._add_repeated(node, form, bindings, suffix, seen)
        else:
            raise TypeError(f"Unsupported field node type: {type(node)}")

    def _add_leaf(
        self, name: str, attributes: Dict[str, Any], form, bindings: Dict[str, Any], seen: Set[str]
    ) -> None:
        if name in seen:
            raise CompileError(f"Duplicate field name: {name}.")
        seen.add(name)

        type_name = attributes.get("type")
        field_type = self.types.lookup(type_name)
        if field_type is None:
            raise CompileError(f"Unknown field type '{type_name}' for field {name}.")

        declared = attributes.get("name")
        if declared is not None and declared != name:
            warnings.warn(f"Ignoring name '{declared}' declared inside field {name}", UserWarning)

        options = {k: v for k, v in attributes.items() if k not in ("name", "type")}
        options = bind_options(options, bindings)

        form.add_field(self.field_factory(name, field_type, options))

    def _add_section(
        self, node: SectionNode, form, bindings: Dict[str, Any], suffix: str, seen: Set[str]
    ) -> None:
        header = {"type": "section", "label": node.label, "options": {}}
        self._add_leaf(section_header_name(node.label) + suffix, header, form, bindings, seen)

        # No section nesting: the body goes straight in below the header
        for child in node.body:
            self.expand(child, form, bindings, suffix, seen)

    def _add_repeated(
        self, node: RepeatNode, form, bindings: Dict[str, Any], suffix: str, seen: Set[str]
    ) -> None:
        check_repeat_bounds(node)
        logger.debug("Expanding %s over %d..%d", node.name, node.start, node.end)

        for i in range(node.start, node.end + 1):
            # Existing bindings win over the repeater on a name clash
            inner = {REPEATER_VARIABLE: str(i), **bindings}
            for child in node.body:
                self.expand(child, form, inner, suffix + str(i), seen)


def compile_form(document: FormDocument, action: str, bindings: Optional[Dict[str, Any]] = None):
    """Compile a document with the default type registry and form objects."""
    return FormCompiler().compile(document, action, bindings)


def load_and_compile(
    module: str,
    name: str,
    action: str,
    bindings: Optional[Dict[str, Any]] = None,
    settings: Optional[Settings] = None,
    compiler: Optional[FormCompiler] = None,
):
    """
    Load a form from its module and name, then compile it.

    Args:
        module: Name of the calling module
        name: File name of the form, without ".json"
        action: Name of the action to trigger on submission
        bindings: Names used in !bind directives → values
        settings: Optional settings; read from the environment if omitted
        compiler: Optional compiler; a default one is used if omitted

    Returns:
        The compiled form
    """
    document = load_form_document(module, name, settings)
    return (compiler or FormCompiler()).compile(document, action, bindings)


__all__ = [
    "REPEATER_VARIABLE",
    "FormCompiler",
    "compile_form",
    "load_and_compile",
    "section_header_name",
]

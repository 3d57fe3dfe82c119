"""
Parsed Form Document Model

Defines the structures a form definition is parsed into:
    - LeafNode (an ordinary field description)
    - SectionNode (a !section(label) directive and its body)
    - RepeatNode (a !repeat(start, end) directive and its body)
    - FormDocument (root container)

Every entry of a definition's "fields" object becomes exactly one node.
The node kind is decided once, when the document is parsed, so the
compiler dispatches on the node's class rather than re-reading key names.

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about field construction or rendering
        - Are immutable once parsed
        - Preserve document order
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class LeafNode:
    """
    An ordinary field description.

    Properties:
        name:
            The key the field was declared under (e.g. "fname")

        attributes:
            The full field description mapping, e.g.
            {"type": "text", "label": "First name", "options": {...}}
            May redundantly carry "name"; the compiler strips "name"
            and "type" before handing the rest to field construction.
    """

    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> Optional[str]:
        return self.attributes.get("type")


@dataclass(frozen=True)
class SectionNode:
    """
    A !section(label) directive.

    Emits a header field followed by its body, flat (no nested scope).

    Properties:
        name: The raw directive key, e.g. "!section(Personal details)"
        label: Text between the parentheses, verbatim
        body: Child nodes in document order
    """

    name: str
    label: str
    body: Tuple["FieldNode", ...] = ()


@dataclass(frozen=True)
class RepeatNode:
    """
    A !repeat(start, end) directive.

    Expands its body once per index in start..end inclusive.
    Bounds are stored as parsed; ordering is checked at compile time.

    Properties:
        name: The raw directive key, e.g. "!repeat(0, 4)"
        start: First index
        end: Last index (inclusive)
        body: Child nodes in document order
    """

    name: str
    start: int
    end: int
    body: Tuple["FieldNode", ...] = ()


FieldNode = Union[LeafNode, SectionNode, RepeatNode]


@dataclass(frozen=True)
class FormDocument:
    """
    Root container for a parsed form definition.

    Properties:
        name:
            Form identifier

        module:
            The calling module's name. Supplied by the caller, it takes
            precedence over any "module" key in the source.

        options:
            Opaque mapping forwarded verbatim to form construction

        fields:
            Top-level nodes in document order

        declared_module / declared_action:
            The "module" and "action" keys as written in the source.
            Informational only: the action used for a compiled form is
            always the one passed to the compiler.
    """

    name: str
    module: str
    options: Dict[str, Any] = field(default_factory=dict)
    fields: Tuple[FieldNode, ...] = ()
    declared_module: Optional[str] = None
    declared_action: Optional[str] = None

    def walk(self) -> Iterator[FieldNode]:
        """Yield every node in the document, depth first, in document order."""
        stack = list(reversed(self.fields))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, (SectionNode, RepeatNode)):
                stack.extend(reversed(node.body))

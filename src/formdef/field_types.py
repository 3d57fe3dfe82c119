"""
Field Type Registry

Declares the closed set of field kinds the field-construction layer
understands, and a registry that resolves type names written in form
definitions to those kinds.

Type names in JSON definitions are case insensitive:
    "text", "TEXT" and "TeXt" all resolve to FieldType.TEXT

ARCHITECTURAL RULE:
    The set of types is declared statically.
    Lookup never falls back to a default; an unknown name resolves to None
    and the caller decides how to fail.
"""

from enum import IntEnum
from typing import Dict, Iterable, List, Optional


class FieldType(IntEnum):
    """
    Field kinds known to the form layer.

    The integer values are the constants handed to field construction.
    """

    TEXT = 0
    NUMBER = 1
    EMAIL = 2
    DATE = 3
    DATETIME = 4
    MEMBER = 5
    TRACK = 6
    ARTIST = 7
    HIDDEN = 8
    SELECT = 9
    RADIO = 10
    CHECK = 11
    DAY = 12
    BLOCKTEXT = 13
    TIME = 14
    CHECKGRP = 15
    TABULARSET = 16
    ALBUM = 17
    FILE = 18
    SECTION = 19
    PASSWORD = 20


class TypeRegistry:
    """
    Case-insensitive mapping from type name to FieldType.

    Registries are immutable after construction and safe to share
    between compilers.

    Example:
        registry = TypeRegistry(FieldType)
        registry.lookup("TeXt")      # FieldType.TEXT
        registry.lookup("bogus")     # None
    """

    def __init__(self, types: Iterable[FieldType]):
        self._by_name: Dict[str, FieldType] = {t.name.upper(): t for t in types}

    def lookup(self, name: str) -> Optional[FieldType]:
        """
        Resolve a type name.

        Args:
            name: Type name as written in the definition (any case)

        Returns:
            FieldType or None if the name is unknown or not a string
        """
        if not isinstance(name, str):
            return None
        return self._by_name.get(name.upper())

    def names(self) -> List[str]:
        return sorted(n.lower() for n in self._by_name)

    def __contains__(self, name) -> bool:
        return self.lookup(name) is not None


DEFAULT_TYPES = TypeRegistry(FieldType)

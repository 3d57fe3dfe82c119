"""
Tests for the field type registry.

Type names in definitions are case insensitive and never fall back
to a default type.
"""

import pytest
from formdef.field_types import DEFAULT_TYPES, FieldType, TypeRegistry


class TestLookup:
    """Test case-insensitive lookup."""

    @pytest.mark.parametrize("name", ["text", "TEXT", "TeXt"])
    def test_case_variations_resolve(self, name):
        assert DEFAULT_TYPES.lookup(name) is FieldType.TEXT

    def test_section_type(self):
        assert DEFAULT_TYPES.lookup("section") is FieldType.SECTION

    def test_unknown_name(self):
        assert DEFAULT_TYPES.lookup("hologram") is None

    def test_non_string_name(self):
        """Missing or non-string types never resolve."""
        assert DEFAULT_TYPES.lookup(None) is None
        assert DEFAULT_TYPES.lookup(3) is None

    def test_contains(self):
        assert "Select" in DEFAULT_TYPES
        assert "nope" not in DEFAULT_TYPES


class TestCustomRegistry:
    """Registries can be restricted to a subset of types."""

    def test_subset_registry(self):
        registry = TypeRegistry([FieldType.TEXT, FieldType.SECTION])
        assert registry.lookup("text") is FieldType.TEXT
        assert registry.lookup("email") is None
        assert registry.names() == ["section", "text"]

    def test_values_are_integers(self):
        assert int(FieldType.TEXT) == 0
        assert isinstance(DEFAULT_TYPES.lookup("number"), int)

"""Unit tests for the ImportMap accumulator."""

import pytest

from graphql_explorer.codegen.core.imports import ImportMap


class TestImportMapMerge:
    """Tests for merging import maps."""

    def test_merge_unions_names_per_module(self) -> None:
        """Merging two maps for the same module keeps both names."""
        merged = ImportMap.of("typing", "List").merge(ImportMap.of("typing", "Optional"))
        assert merged.names_for("typing") == ("List", "Optional")

    def test_merge_is_commutative(self) -> None:
        a = ImportMap.from_mapping({"A": ["x"], "B": ["z"]})
        b = ImportMap.from_mapping({"A": ["y"]})
        assert a.merge(b) == b.merge(a)
        assert a.merge(b).to_dict() == {"A": ["x", "y"], "B": ["z"]}

    def test_merge_is_associative(self) -> None:
        a = ImportMap.of("A", "x")
        b = ImportMap.of("A", "y")
        c = ImportMap.of("C", "w")
        assert a.merge(b).merge(c) == a.merge(b.merge(c))

    def test_empty_map_is_identity(self) -> None:
        a = ImportMap.from_mapping({"typing": ["Union"]})
        assert a.merge(ImportMap()) == a
        assert ImportMap().merge(a) == a

    def test_merge_does_not_modify_inputs(self) -> None:
        a = ImportMap.of("typing", "List")
        b = ImportMap.of("typing", "Optional")
        a.merge(b)
        assert a.names_for("typing") == ("List",)
        assert b.names_for("typing") == ("Optional",)

    def test_or_operator_merges(self) -> None:
        assert (ImportMap.of("m", "a") | ImportMap.of("m", "b")).names_for("m") == ("a", "b")

    def test_duplicate_names_are_deduplicated(self) -> None:
        merged = ImportMap.of("typing", "List").merge(ImportMap.of("typing", "List"))
        assert merged.to_dict() == {"typing": ["List"]}


class TestImportMapConstruction:
    """Tests for building import maps."""

    def test_from_mapping_accepts_single_string(self) -> None:
        """A bare string is one name, not a sequence of characters."""
        imports = ImportMap.from_mapping({"pydantic": "BaseModel"})
        assert imports.names_for("pydantic") == ("BaseModel",)

    def test_from_mapping_none_is_empty(self) -> None:
        assert not ImportMap.from_mapping(None)
        assert ImportMap.from_mapping(None) == ImportMap()

    def test_module_with_no_names_is_ignored_for_equality(self) -> None:
        assert ImportMap.from_mapping({"typing": []}) == ImportMap()
        assert not ImportMap.from_mapping({"typing": []})

    def test_contains_and_iteration(self) -> None:
        imports = ImportMap.from_mapping({"typing": ["List"], "pydantic": ["BaseModel"]})
        assert "typing" in imports
        assert "dataclasses" not in imports
        assert set(imports) == {"typing", "pydantic"}

    def test_is_hashable(self) -> None:
        assert hash(ImportMap.of("typing", "List")) == hash(ImportMap.of("typing", "List"))

    def test_is_immutable(self) -> None:
        imports = ImportMap()
        with pytest.raises(AttributeError):
            imports.entries = {}  # type: ignore[misc]


class TestImportStatements:
    """Tests for formatting import statements."""

    def test_names_are_sorted(self) -> None:
        imports = ImportMap.from_mapping({"typing": ["Union", "List", "Optional"]})
        assert imports.to_statements() == ["from typing import List, Optional, Union"]

    def test_one_line_per_module_in_first_seen_order(self) -> None:
        imports = ImportMap.of("typing", "List").merge(ImportMap.of("pydantic", "BaseModel"))
        assert imports.to_statements() == [
            "from typing import List",
            "from pydantic import BaseModel",
        ]

    def test_empty_map_has_no_statements(self) -> None:
        assert ImportMap().to_statements() == []

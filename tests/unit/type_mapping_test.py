"""Unit tests for GraphQL to Python type name mapping."""

import pytest

from graphql_explorer.codegen import GeneratorConfig
from graphql_explorer.codegen.languages.python.config import (
    PYTHON_BUILTIN_TYPES,
    get_type_map,
    map_type_name,
)


@pytest.mark.parametrize(
    ("graphql_name", "python_name"),
    [
        ("Int", "int"),
        ("Float", "float"),
        ("String", "str"),
        ("Boolean", "bool"),
        ("ID", "str"),
    ],
)
def test_builtin_scalars_map_to_primitives(graphql_name: str, python_name: str) -> None:
    assert map_type_name(graphql_name) == python_name


def test_unknown_name_becomes_forward_reference() -> None:
    assert map_type_name("DateTime") == '"DateTime"'


def test_object_type_name_becomes_forward_reference() -> None:
    assert map_type_name("User", GeneratorConfig()) == '"User"'


def test_configured_type_extends_table() -> None:
    config = GeneratorConfig(extra_types={"DateTime": "datetime"})
    assert map_type_name("DateTime", config) == "datetime"


def test_configured_type_overrides_builtin() -> None:
    config = GeneratorConfig(extra_types={"ID": "UUID"})
    assert map_type_name("ID", config) == "UUID"
    assert map_type_name("String", config) == "str"


def test_type_map_does_not_change_builtin_table() -> None:
    get_type_map(GeneratorConfig(extra_types={"Int": "Decimal"}))
    assert PYTHON_BUILTIN_TYPES["Int"] == "int"

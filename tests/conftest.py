"""Shared fixtures and helpers for tests."""

from typing import Callable

import pytest
from graphql import GraphQLSchema, build_schema, parse
from graphql.language import FieldDefinitionNode

from graphql_explorer.codegen import GeneratorConfig

USER_SDL = """
type User {
  id: ID!
  name: String
  tags: [String!]!
}
"""

RESULT_SDL = """
type Success {
  value: Int!
}

type Failure {
  reason: String!
}

union Result = Success | Failure
"""


def field_definition(type_sdl: str, name: str = "field") -> FieldDefinitionNode:
    """Parse a single field definition with the given SDL type."""
    document = parse(f"type Holder {{ {name}: {type_sdl} }}")
    return document.definitions[0].fields[0]


@pytest.fixture
def make_field() -> Callable[..., FieldDefinitionNode]:
    return field_definition


@pytest.fixture
def user_schema() -> GraphQLSchema:
    return build_schema(USER_SDL)


@pytest.fixture
def result_schema() -> GraphQLSchema:
    return build_schema(RESULT_SDL)


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(USER_SDL, encoding="utf-8")
    return path

"""
Schema inspection helpers for code generation.

Generators receive a graphql-core GraphQLSchema. These helpers answer the
questions the generation layer asks about it (which types were defined in
SDL, of which kinds) without touching the rendering logic.
"""

from collections import Counter
from typing import Dict, Iterator, List, Tuple

from graphql import GraphQLSchema, is_introspection_type, is_specified_scalar_type
from graphql.language import Node

from .nodes import NodeKind


def iter_defined_types(schema: GraphQLSchema) -> Iterator[Tuple[str, Node]]:
    """
    Yield ``(name, ast_node)`` for every type defined in the schema source.

    Built-in scalars and introspection types have no AST node and are
    skipped. Order follows ``schema.type_map``.
    """
    for name, graphql_type in schema.type_map.items():
        if is_introspection_type(graphql_type) or is_specified_scalar_type(
            graphql_type
        ):
            continue
        ast_node = getattr(graphql_type, "ast_node", None)
        if ast_node is not None:
            yield name, ast_node


def get_kind_summary(schema: GraphQLSchema) -> Dict[str, int]:
    """Count the defined types of each node kind."""
    return dict(Counter(node.kind for _, node in iter_defined_types(schema)))


def get_custom_scalars(schema: GraphQLSchema) -> List[str]:
    """Names of scalars declared in the schema source, in schema order."""
    return [
        name
        for name, node in iter_defined_types(schema)
        if node.kind == NodeKind.SCALAR_TYPE_DEFINITION
    ]


def get_empty_object_types(schema: GraphQLSchema) -> List[str]:
    """Names of object types declared without any fields."""
    return [
        name
        for name, node in iter_defined_types(schema)
        if node.kind == NodeKind.OBJECT_TYPE_DEFINITION and not node.fields
    ]

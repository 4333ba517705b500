"""
Schema node helpers for code generation.

Generators walk graphql-core AST nodes. Before a node is rendered it goes
through normalize_node(), which makes nullability explicit by wrapping
nullable types in a synthetic OptionalTypeNode.
"""

from copy import copy
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from graphql.language import (
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    Node,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
)


@dataclass(frozen=True)
class OptionalTypeNode:
    """Synthetic wrapper marking a nullable type. Never produced by the parser."""

    kind: ClassVar[str] = "optional_type"

    type: Any


class NodeKind:
    """Node kinds understood by generators."""

    SCALAR_TYPE_DEFINITION = ScalarTypeDefinitionNode.kind
    NON_NULL_TYPE = NonNullTypeNode.kind
    LIST_TYPE = ListTypeNode.kind
    OPTIONAL_TYPE = OptionalTypeNode.kind
    NAMED_TYPE = NamedTypeNode.kind
    FIELD_DEFINITION = FieldDefinitionNode.kind
    UNION_TYPE_DEFINITION = UnionTypeDefinitionNode.kind
    OBJECT_TYPE_DEFINITION = ObjectTypeDefinitionNode.kind


# Nodes whose inner type becomes Optional unless declared non-null
_NULLABLE_WRAPPERS = (NodeKind.FIELD_DEFINITION, NodeKind.LIST_TYPE)


def node_kind(node: Any) -> Optional[str]:
    """Return the kind of an AST or synthetic node, or None for anything else."""
    if isinstance(node, (Node, OptionalTypeNode)):
        return node.kind
    return None


def resolve_node(node: Any) -> Any:
    """Prefer the AST node behind a GraphQL type object when one is attached."""
    ast_node = getattr(node, "ast_node", None)
    return ast_node if ast_node is not None else node


def normalize_node(node: Any) -> Any:
    """
    Prepare a node for rendering.

    Field definitions and list types whose inner type is nullable get a copy
    with that inner type wrapped in OptionalTypeNode. The input node is
    never modified.

    Args:
        node: AST node, GraphQL type object, or synthetic node

    Returns:
        The node to render
    """
    node = resolve_node(node)

    if node_kind(node) not in _NULLABLE_WRAPPERS:
        return node

    inner = node.type
    if node_kind(inner) in (NodeKind.NON_NULL_TYPE, NodeKind.OPTIONAL_TYPE):
        return node

    patched = copy(node)
    patched.type = OptionalTypeNode(type=inner)
    return patched

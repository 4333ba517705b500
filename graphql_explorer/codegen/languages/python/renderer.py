"""
Rendering of GraphQL schema nodes into Python source fragments.

render_node() looks up a handler by node kind and returns the fragment
together with the imports it needs. Handlers recurse through render_node()
for child nodes, so every child is normalized on the way down.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.imports import ImportMap
from ...core.nodes import NodeKind, node_kind, normalize_node
from ...core.templates import TemplateEngine, create_template_engine
from .config import (
    EMPTY_BODY,
    LIST_TYPE,
    NONE_TYPE,
    OPTIONAL_TYPE,
    TYPING_MODULE,
    UNION_TYPE,
    map_type_name,
)
from .templates import PYTHON_TEMPLATES

logger = get_logger(__name__)

DEFAULT_CONFIG = GeneratorConfig()


class RenderResult(NamedTuple):
    """Rendered fragment (None when the node produces no code) and its imports."""

    code: Optional[str]
    imports: ImportMap

    @classmethod
    def empty(cls) -> "RenderResult":
        return cls(None, ImportMap())


Handler = Callable[[Any, GeneratorConfig], RenderResult]


@lru_cache(maxsize=None)
def get_template_engine() -> TemplateEngine:
    """Template engine holding the Python templates."""
    return create_template_engine(templates=PYTHON_TEMPLATES)


def render_node(node: Any, config: Optional[GeneratorConfig] = None) -> RenderResult:
    """
    Render a single schema node.

    Nodes without a kind render to nothing. Nodes of a kind with no handler
    are logged and render to nothing, so one unsupported construct never
    stops the rest of the schema from being generated.
    """
    config = config or DEFAULT_CONFIG
    node = normalize_node(node)

    kind = node_kind(node)
    if kind is None:
        return RenderResult.empty()

    handler = NODE_HANDLERS.get(kind)
    if handler is None:
        logger.warning("Could not find handler for %s", kind)
        return RenderResult.empty()

    return handler(node, config)


def render_nodes(
    nodes: Optional[Iterable[Any]], config: Optional[GeneratorConfig] = None
) -> Tuple[List[str], ImportMap]:
    """
    Render sibling nodes in order.

    Returns:
        Non-empty fragments in input order and the merged imports
    """
    items = []
    imports = ImportMap()

    for node in nodes or ():
        code, node_imports = render_node(node, config)
        if not code:
            continue

        imports = imports.merge(node_imports)
        items.append(code)

    return items, imports


def _render_nothing(node: Any, config: GeneratorConfig) -> RenderResult:
    return RenderResult.empty()


def _render_non_null(node: Any, config: GeneratorConfig) -> RenderResult:
    return render_node(node.type, config)


def _render_list(node: Any, config: GeneratorConfig) -> RenderResult:
    code, imports = render_node(node.type, config)
    return RenderResult(
        f"{LIST_TYPE}[{code}]",
        imports.merge(ImportMap.of(TYPING_MODULE, LIST_TYPE)),
    )


def _render_optional(node: Any, config: GeneratorConfig) -> RenderResult:
    code, imports = render_node(node.type, config)
    return RenderResult(
        f"{OPTIONAL_TYPE}[{code}]",
        imports.merge(ImportMap.of(TYPING_MODULE, OPTIONAL_TYPE)),
    )


def _render_named_type(node: Any, config: GeneratorConfig) -> RenderResult:
    return RenderResult(map_type_name(node.name.value, config), ImportMap())


def _render_field(node: Any, config: GeneratorConfig) -> RenderResult:
    code, imports = render_node(node.type, config)
    return RenderResult(f"{node.name.value}: {code or NONE_TYPE}", imports)


def _render_union(node: Any, config: GeneratorConfig) -> RenderResult:
    members, imports = render_nodes(node.types, config)
    if not members:
        # Union[] would not compile
        logger.warning("Union %s has no renderable members", node.name.value)
        return RenderResult.empty()

    return RenderResult(
        f"{node.name.value} = {UNION_TYPE}[{', '.join(members)}]",
        imports.merge(ImportMap.of(TYPING_MODULE, UNION_TYPE)),
    )


def _render_object(node: Any, config: GeneratorConfig) -> RenderResult:
    fields, imports = render_nodes(node.fields, config)
    code = get_template_engine().render_template(
        "class.py.j2",
        {
            "class_name": node.name.value,
            "super_class": config.super_class,
            "body": "\n".join(fields) if fields else EMPTY_BODY,
            "indent": config.indent,
        },
    )
    return RenderResult(code, imports)


NODE_HANDLERS: Dict[str, Handler] = {
    NodeKind.SCALAR_TYPE_DEFINITION: _render_nothing,
    NodeKind.NON_NULL_TYPE: _render_non_null,
    NodeKind.LIST_TYPE: _render_list,
    NodeKind.OPTIONAL_TYPE: _render_optional,
    NodeKind.NAMED_TYPE: _render_named_type,
    NodeKind.FIELD_DEFINITION: _render_field,
    NodeKind.UNION_TYPE_DEFINITION: _render_union,
    NodeKind.OBJECT_TYPE_DEFINITION: _render_object,
}

"""
Python code generator module.

Generates Python classes and Union aliases from GraphQL schemas.
"""

from .generator import (
    PythonGenerator,
    create_python_generator,
    create_pydantic_generator,
    from_schema,
)
from .config import PYTHON_BUILTIN_TYPES, get_type_map, map_type_name
from .renderer import NODE_HANDLERS, RenderResult, render_node, render_nodes

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    "create_pydantic_generator",
    "from_schema",
    # Type mapping
    "PYTHON_BUILTIN_TYPES",
    "get_type_map",
    "map_type_name",
    # Rendering
    "NODE_HANDLERS",
    "RenderResult",
    "render_node",
    "render_nodes",
]

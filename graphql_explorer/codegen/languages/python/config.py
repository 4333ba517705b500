"""
Python-specific type mappings.

Maps GraphQL scalar names to Python type names. Anything not in the table
becomes a quoted forward reference, resolved when the generated module is
loaded.
"""

from typing import Dict, Optional

from ...core.config import GeneratorConfig


# GraphQL built-in scalar -> Python type
PYTHON_BUILTIN_TYPES = {
    "Int": "int",
    "Float": "float",
    "String": "str",
    "Boolean": "bool",
    "ID": "str",
}

# Names imported from ``typing`` by the wrappers the renderer emits
TYPING_MODULE = "typing"
LIST_TYPE = "List"
OPTIONAL_TYPE = "Optional"
UNION_TYPE = "Union"

# Stand-in for a field whose type renders to nothing
NONE_TYPE = "None"

# Body of a class with no renderable fields
EMPTY_BODY = "pass"


def get_type_map(config: Optional[GeneratorConfig] = None) -> Dict[str, str]:
    """Built-in table merged with configured overrides."""
    type_map = dict(PYTHON_BUILTIN_TYPES)
    if config is not None:
        type_map.update(config.extra_types)
    return type_map


def map_type_name(name: str, config: Optional[GeneratorConfig] = None) -> str:
    """
    Get the Python type for a GraphQL type name.

    Configured overrides win over built-ins. Unknown names are returned as
    a forward reference, e.g. ``"DateTime"``.
    """
    type_map = get_type_map(config)
    if name in type_map:
        return type_map[name]
    return f'"{name}"'

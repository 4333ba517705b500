"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .imports import ImportMap
from .nodes import NodeKind, OptionalTypeNode, node_kind, normalize_node
from .schema import (
    iter_defined_types,
    get_kind_summary,
    get_custom_scalars,
    get_empty_object_types,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Rendering building blocks
    "ImportMap",
    "NodeKind",
    "OptionalTypeNode",
    "node_kind",
    "normalize_node",
    # Schema inspection
    "iter_defined_types",
    "get_kind_summary",
    "get_custom_scalars",
    "get_empty_object_types",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]

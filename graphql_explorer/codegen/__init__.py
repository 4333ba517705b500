"""
GraphQL Explorer Code Generation Module

Generates code in various languages from GraphQL schemas.
"""

from graphql import GraphQLSchema, build_schema

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_supported_languages,
    register_generator,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.imports import ImportMap
from .core.nodes import OptionalTypeNode, normalize_node
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .languages.python import PythonGenerator, from_schema, render_node, render_nodes

# Version info
__version__ = "0.1.0"


def generate_from_schema(
    schema: GraphQLSchema, language="python", config=None
) -> GenerationResult:
    """
    Generate code from a parsed schema.

    Args:
        schema: GraphQLSchema, e.g. from graphql.build_schema()
        language: Target language name
        config: Generator configuration (GeneratorConfig, dict or path)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, schema)


def quick_generate(sdl: str, language="python", **options) -> str:
    """
    Quick code generation from SDL text.

    Args:
        sdl: GraphQL schema definition language source
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    schema = build_schema(sdl)
    result = generate_from_schema(schema, language, options)

    if result.success:
        return result.code
    else:
        raise GeneratorError(f"Code generation failed: {result.error_message}")


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "ImportMap",
    "OptionalTypeNode",
    "normalize_node",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "PythonGenerator",
    "from_schema",
    "render_node",
    "render_nodes",
    "generate_from_schema",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "get_registry",
    "is_language_supported",
    "list_supported_languages",
    "register_generator",
]

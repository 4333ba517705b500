"""
GraphQL Explorer

Generates Python type definitions from GraphQL schemas.
"""

from .codegen import __version__, from_schema, generate_from_schema, quick_generate

__all__ = ["__version__", "from_schema", "generate_from_schema", "quick_generate"]

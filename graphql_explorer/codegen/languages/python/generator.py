"""
Python code generator implementation.

Generates Python classes and Union aliases from a GraphQL schema.
"""

from typing import Dict, FrozenSet, List, Optional

from graphql import GraphQLSchema

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.imports import ImportMap
from ...core.schema import get_custom_scalars, get_empty_object_types
from .config import get_type_map
from .renderer import NODE_HANDLERS, render_nodes
from .templates import PYTHON_TEMPLATES

logger = get_logger(__name__)


class PythonGenerator(CodeGenerator):
    """Code generator for Python type definitions."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def supported_kinds(self) -> FrozenSet[str]:
        return frozenset(NODE_HANDLERS)

    def get_templates(self) -> Dict[str, str]:
        return PYTHON_TEMPLATES

    def generate(self, schema: GraphQLSchema) -> str:
        """Generate the complete Python module for a schema."""
        items, imports = render_nodes(schema.type_map.values(), self.config)
        imports = self.config.import_seed.merge(imports)

        logger.debug(
            "Rendered %d definitions requiring %d import modules",
            len(items),
            len(imports.to_statements()),
        )
        return self.render_module(items, imports)

    def render_module(self, items: List[str], imports: ImportMap) -> str:
        """Join import statements and definitions, separated by blank lines."""
        sections = ["\n".join(imports.to_statements()), *items]
        return self.render_template(
            "module.py.j2",
            {"sections": [s for s in sections if s], "separator": "\n\n"},
        )

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """Validate schema for Python generation."""
        warnings = super().validate_schema(schema)

        type_map = get_type_map(self.config)
        for name in get_custom_scalars(schema):
            if name not in type_map:
                warnings.append(
                    f"Scalar {name} has no Python mapping - rendered as forward reference"
                )

        for name in get_empty_object_types(schema):
            warnings.append(f"Type {name} has no fields - will generate empty class")

        return warnings


def from_schema(
    schema: GraphQLSchema, config: Optional[GeneratorConfig] = None
) -> str:
    """Render a schema to Python source with the given configuration."""
    return PythonGenerator(config).generate(schema)


def create_python_generator(
    super_class: Optional[str] = None, **options
) -> PythonGenerator:
    """Create a Python generator, optionally with a base class for all types."""
    return PythonGenerator(GeneratorConfig(super_class=super_class, **options))


def create_pydantic_generator() -> PythonGenerator:
    """Create a generator whose classes subclass pydantic's BaseModel."""
    return create_python_generator(
        super_class="BaseModel", extra_imports={"pydantic": ["BaseModel"]}
    )


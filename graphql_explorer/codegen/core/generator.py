"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Any, Optional

from graphql import GraphQLSchema

from ...logging_config import get_logger
from .config import GeneratorConfig, ConfigManager
from .nodes import NodeKind
from .schema import iter_defined_types
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(templates=self.get_templates())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.py')."""
        pass

    @property
    @abstractmethod
    def supported_kinds(self) -> FrozenSet[str]:
        """Node kinds this generator renders into code."""
        pass

    def get_templates(self) -> Dict[str, str]:
        """
        Return in-memory templates for this generator.

        Subclasses override this to provide their templates.
        """
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: GraphQLSchema) -> str:
        """
        Generate code for every type in the schema.

        Args:
            schema: Parsed GraphQL schema

        Returns:
            Generated code as a string
        """
        pass

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """
        Report schema constructs this generator will skip.

        Language generators should override this to add language-specific
        validation.

        Args:
            schema: Schema to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = ConfigManager().validate_config(self.config)

        for name, node in iter_defined_types(schema):
            if node.kind not in self.supported_kinds:
                warnings.append(
                    f"Type '{name}' ({node.kind}) is not supported and will be skipped"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render one of this generator's templates."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: GraphQLSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        for warning in warnings:
            logger.debug("Validation warning: %s", warning)

        code = generator.generate(schema)
        formatted_code = generator.format_code(code)

        defined = list(iter_defined_types(schema))
        # Scalar definitions are handled but emit no code
        rendered = [
            node
            for _, node in defined
            if node.kind in generator.supported_kinds
            and node.kind != NodeKind.SCALAR_TYPE_DEFINITION
        ]
        skipped = sorted(
            {node.kind for _, node in defined if node.kind not in generator.supported_kinds}
        )
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(defined),
            "rendered_count": len(rendered),
            "skipped_kinds": skipped,
            "line_count": len(formatted_code.splitlines()),
        }

        logger.info(
            "Generated %s code for %d types", generator.language_name, len(defined)
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

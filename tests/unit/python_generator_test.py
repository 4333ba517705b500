"""Unit tests for assembling complete Python modules."""

from graphql import build_schema

from graphql_explorer.codegen import (
    GeneratorConfig,
    PythonGenerator,
    from_schema,
    generate_code,
    quick_generate,
)
from graphql_explorer.codegen.languages.python import create_pydantic_generator


class TestFromSchema:
    """Tests for the module assembler."""

    def test_user_type(self, user_schema) -> None:
        assert from_schema(user_schema) == (
            "from typing import List, Optional\n"
            "\n"
            "class User:\n"
            "    id: str\n"
            "    name: Optional[str]\n"
            "    tags: List[str]"
        )

    def test_union_and_members(self, result_schema) -> None:
        assert from_schema(result_schema) == (
            "from typing import Union\n"
            "\n"
            "class Success:\n"
            "    value: int\n"
            "\n"
            "class Failure:\n"
            "    reason: str\n"
            "\n"
            'Result = Union["Success", "Failure"]'
        )

    def test_no_imports_means_no_import_block(self) -> None:
        schema = build_schema("type Point { x: Float! y: Float! }")
        assert from_schema(schema) == "class Point:\n    x: float\n    y: float"

    def test_schema_rendering_nothing_is_empty_string(self) -> None:
        schema = build_schema("scalar DateTime\nenum Color { RED }")
        assert from_schema(schema) == ""

    def test_unsupported_types_are_skipped(self) -> None:
        schema = build_schema(
            """
            enum Color { RED GREEN }
            input Filter { name: String }
            type Item { color: Color! }
            """
        )
        assert from_schema(schema) == 'class Item:\n    color: "Color"'

    def test_custom_scalar_reference(self) -> None:
        schema = build_schema("scalar DateTime\ntype Event { at: DateTime! }")
        assert from_schema(schema) == 'class Event:\n    at: "DateTime"'

    def test_configuration_is_applied(self) -> None:
        schema = build_schema("scalar DateTime\ntype Event { at: DateTime }")
        config = GeneratorConfig(
            super_class="BaseModel",
            extra_imports={"pydantic": ["BaseModel"], "datetime": ["datetime"]},
            extra_types={"DateTime": "datetime"},
        )
        code = from_schema(schema, config)
        assert code.splitlines()[:3] == [
            "from pydantic import BaseModel",
            "from datetime import datetime",
            "from typing import Optional",
        ]
        assert "class Event(BaseModel):\n    at: Optional[datetime]" in code

    def test_seed_imports_merge_with_rendered_imports(self) -> None:
        schema = build_schema("type Box { items: [Int!]! }")
        config = GeneratorConfig(extra_imports={"typing": ["Any"]})
        assert from_schema(schema, config).startswith("from typing import Any, List\n\n")

    def test_seed_imports_alone(self) -> None:
        schema = build_schema("scalar DateTime")
        config = GeneratorConfig(extra_imports={"typing": ["Any"]})
        assert from_schema(schema, config) == "from typing import Any"

    def test_output_is_deterministic(self, result_schema) -> None:
        config = GeneratorConfig(super_class="Base")
        assert from_schema(result_schema, config) == from_schema(result_schema, config)

    def test_output_compiles(self, user_schema, result_schema) -> None:
        compile(from_schema(user_schema), "<generated>", "exec")
        compile(from_schema(result_schema), "<generated>", "exec")

    def test_generated_module_executes(self) -> None:
        schema = build_schema(
            """
            type Author { name: String! posts: [Post!]! }
            type Post { title: String author: Author }
            union Entry = Author | Post
            """
        )
        namespace = {}
        exec(compile(from_schema(schema), "<generated>", "exec"), namespace)
        assert namespace["Author"].__annotations__["name"] is str
        assert "Entry" in namespace


class TestPythonGenerator:
    """Tests for the generator class."""

    def test_language_metadata(self) -> None:
        generator = PythonGenerator()
        assert generator.language_name == "python"
        assert generator.file_extension == ".py"
        assert "object_type_definition" in generator.supported_kinds
        assert "enum_type_definition" not in generator.supported_kinds

    def test_pydantic_generator(self, user_schema) -> None:
        code = create_pydantic_generator().generate(user_schema)
        assert "from pydantic import BaseModel" in code
        assert "class User(BaseModel):" in code

    def test_validate_reports_skipped_and_special_types(self) -> None:
        schema = build_schema(
            """
            scalar DateTime
            scalar JSON
            enum Color { RED }
            type Empty
            """
        )
        generator = PythonGenerator(GeneratorConfig(extra_types={"JSON": "dict"}))
        warnings = generator.validate_schema(schema)
        assert "Type 'Color' (enum_type_definition) is not supported and will be skipped" in warnings
        assert "Scalar DateTime has no Python mapping - rendered as forward reference" in warnings
        assert not any("JSON" in warning for warning in warnings)
        assert "Type Empty has no fields - will generate empty class" in warnings

    def test_validate_includes_config_warnings(self, user_schema) -> None:
        generator = PythonGenerator(GeneratorConfig(super_class="not valid"))
        assert "Invalid base class name: not valid" in generator.validate_schema(user_schema)


class TestGenerateCode:
    """Tests for the generation wrapper."""

    def test_successful_result(self, user_schema) -> None:
        result = generate_code(PythonGenerator(), user_schema)
        assert result.success
        assert result.code == from_schema(user_schema)
        assert result.metadata["language"] == "python"
        assert result.metadata["type_count"] == 1
        assert result.metadata["rendered_count"] == 1
        assert result.metadata["skipped_kinds"] == []

    def test_skipped_kinds_in_metadata(self) -> None:
        schema = build_schema("enum Color { RED }\ninterface Node { id: ID! }")
        result = generate_code(PythonGenerator(), schema)
        assert result.success
        assert result.code == ""
        assert result.metadata["skipped_kinds"] == [
            "enum_type_definition",
            "interface_type_definition",
        ]
        assert result.metadata["rendered_count"] == 0

    def test_scalars_do_not_count_as_rendered(self) -> None:
        schema = build_schema("scalar DateTime\ntype A { d: DateTime }")
        result = generate_code(PythonGenerator(), schema)
        assert result.metadata["type_count"] == 2
        assert result.metadata["rendered_count"] == 1

    def test_exceptions_become_failed_result(self, user_schema, monkeypatch) -> None:
        generator = PythonGenerator()

        def explode(schema):
            raise RuntimeError("boom")

        monkeypatch.setattr(generator, "generate", explode)
        result = generate_code(generator, user_schema)
        assert not result.success
        assert result.code == ""
        assert "boom" in result.error_message
        assert isinstance(result.exception, RuntimeError)

    def test_quick_generate(self) -> None:
        code = quick_generate("type User { id: ID! }", super_class="Base")
        assert code == "class User(Base):\n    id: str"

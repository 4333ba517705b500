"""
Command-line interface for GraphQL code generation.

Reads a schema from a file, URL or stdin and prints or writes the
generated code.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from graphql import GraphQLSchema
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    GeneratorConfig,
    RegistryError,
    generate_from_schema,
    get_language_info,
    list_supported_languages,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schema, parse_schema

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphql-explorer",
        description="Generate code from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphql-explorer schema.graphql
  graphql-explorer schema.graphql -o models.py --super-class BaseModel \\
      --extra-import pydantic:BaseModel
  graphql-explorer --url https://example.com/schema.graphql --extra-type DateTime=datetime
  graphql-explorer --list-languages
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="GraphQL SDL file")
    input_group.add_argument("--url", help="URL to fetch the SDL from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read SDL from standard input"
    )

    parser.add_argument(
        "--language", "-l", default="python", help="Target language (default: python)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--super-class", metavar="NAME", help="Base class for generated classes"
    )
    gen_group.add_argument(
        "--extra-type",
        action="append",
        default=[],
        metavar="NAME=TYPE",
        help="Map a GraphQL type to a target type (repeatable)",
    )
    gen_group.add_argument(
        "--extra-import",
        action="append",
        default=[],
        metavar="MODULE:NAME[,NAME]",
        help="Add an import to the generated module (repeatable)",
    )
    gen_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Indentation width"
    )

    out_group = parser.add_argument_group("output options")
    out_group.add_argument(
        "--plain", action="store_true", help="Print code without highlighting"
    )
    out_group.add_argument(
        "--verbose", action="store_true", help="Show generation metadata"
    )
    out_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``graphql-explorer`` command."""
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.list_languages:
            return _list_languages()

        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        schema = _get_input_schema(args)
        config = _build_config(args)
        return _generate_and_output(schema, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages in a table."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _get_input_schema(args: argparse.Namespace) -> GraphQLSchema:
    """Load the schema from the selected input source."""
    try:
        if args.stdin:
            return parse_schema(sys.stdin.read(), "<stdin>")
        source, schema = load_schema(file_path=args.file, url=args.url)
        logger.info("Loaded schema from %s", source)
        return schema
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schema: {e}") from e


def _parse_pairs(values: List[str], separator: str, option: str) -> List[Tuple[str, str]]:
    pairs = []
    for value in values:
        key, sep, item = value.partition(separator)
        if not sep or not key or not item:
            raise CLIError(f"Invalid {option} value '{value}', expected KEY{separator}VALUE")
        pairs.append((key.strip(), item.strip()))
    return pairs


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.super_class:
        overrides["super_class"] = args.super_class
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.output:
        overrides["output_file"] = args.output

    try:
        base = load_config(config_file=args.config) if args.config else GeneratorConfig()

        extra_types = dict(base.extra_types)
        extra_types.update(_parse_pairs(args.extra_type, "=", "--extra-type"))
        overrides["extra_types"] = extra_types

        extra_imports = {module: list(names) for module, names in base.extra_imports.items()}
        for module, names in _parse_pairs(args.extra_import, ":", "--extra-import"):
            extra_imports.setdefault(module, []).extend(
                name.strip() for name in names.split(",") if name.strip()
            )
        overrides["extra_imports"] = extra_imports

        merged = base.to_dict()
        merged.update(overrides)
        return load_config(custom_config=merged)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    schema: GraphQLSchema, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and write or print it."""
    try:
        result = generate_from_schema(schema, args.language, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated {args.language} code saved to [cyan]{output_path}[/cyan]"
        )
    elif args.plain:
        sys.stdout.write(result.code + "\n")
    else:
        console.print(
            Panel(
                Syntax(result.code, args.language, theme="monokai"),
                title=f"📄 Generated {args.language.title()} Code",
                border_style="green",
            )
        )

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

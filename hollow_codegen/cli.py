"""
Command-line interface for hollow_codegen.

Loads object schemas, builds the generator configuration from a config
file and flags, and prints or writes the generated accessor classes.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__, generate_from_schemas
from .core.config import ConfigError, GeneratorConfig, get_config_manager
from .core.generator import GenerationResult
from .core.schema import FieldType, ObjectSchema, SchemaError
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from .utils import JSONLoaderError, load_schemas

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


FIELD_TYPE_ACCESSORS = {
    FieldType.BOOLEAN: ("get<Name>(), get<Name>Boxed()", "boolean / Boolean"),
    FieldType.INT: ("get<Name>(), get<Name>Boxed()", "int / Integer"),
    FieldType.LONG: ("get<Name>(), get<Name>Boxed()", "long / Long"),
    FieldType.FLOAT: ("get<Name>(), get<Name>Boxed()", "float / Float"),
    FieldType.DOUBLE: ("get<Name>(), get<Name>Boxed()", "double / Double"),
    FieldType.BYTES: ("get<Name>()", "byte[]"),
    FieldType.STRING: ("get<Name>(), is<Name>Equal(String)", "String / boolean"),
    FieldType.REFERENCE: ("get<Name>()", "<T> T or <Type>HollowImpl"),
}


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="hollow-codegen",
        description="Generate typed Java accessor classes from object schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hollow-codegen generate schemas.json --package-name com.example.api
  hollow-codegen generate movie.json person.json -o src/main/java
  hollow-codegen generate --url https://example.com/schemas.json
  hollow-codegen field-types
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")
    create_generate_subparser(subparsers)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=_handle_languages)

    field_types = subparsers.add_parser(
        "field-types", help="List field types and the accessors they produce"
    )
    field_types.set_defaults(func=_handle_field_types)

    return parser


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``generate`` subcommand parser."""
    parser = subparsers.add_parser(
        "generate",
        help="Generate accessor classes from schema documents",
        description="Generate one accessor class per object schema",
    )

    input_group = parser.add_argument_group("input")
    input_group.add_argument("files", nargs="*", help="JSON schema documents")
    input_group.add_argument("--url", help="URL to fetch a schema document from")

    parser.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--output-dir",
        "-o",
        help="Source root to write files into (default: print to stdout)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )

    naming_group = parser.add_argument_group("naming options")
    naming_group.add_argument(
        "--package-name", "--package", help="Java package of the generated classes"
    )
    naming_group.add_argument(
        "--api-class-name", help="Name of the API facade class"
    )
    naming_group.add_argument(
        "--class-postfix", help="Suffix appended to every generated type name"
    )
    naming_group.add_argument(
        "--getter-prefix", help="Prefix prepended to every accessor method name"
    )

    types_group = parser.add_argument_group("reference options")
    types_group.add_argument(
        "--parameterize-class-names",
        action="store_true",
        help="Return a type parameter from every reference accessor",
    )
    types_group.add_argument(
        "--parameterize-type",
        action="append",
        metavar="TYPE",
        help="Return a type parameter from references to TYPE (repeatable)",
    )

    parser.set_defaults(func=_handle_generate)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (CLIError, ConfigError, SchemaError, JSONLoaderError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    if not (args.files or args.url):
        raise CLIError("Input source required (schema files or --url)")

    if not is_language_supported(args.language):
        raise CLIError(
            f"Unsupported language '{args.language}'. "
            f"Supported: {', '.join(list_supported_languages())}"
        )

    schemas = load_schemas(args.files, args.url)
    config = _build_config(args)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

    result = generate_from_schemas(schemas, config, args.language)
    return _output_result(result, schemas, args)


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI flags."""
    overrides = {}

    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.api_class_name:
        overrides["api_class_name"] = args.api_class_name
    if args.class_postfix is not None:
        overrides["class_postfix"] = args.class_postfix
    if args.getter_prefix is not None:
        overrides["getter_prefix"] = args.getter_prefix
    if args.parameterize_class_names:
        overrides["parameterize_class_names"] = True
    if args.parameterize_type:
        overrides["parameterized_types"] = list(args.parameterize_type)

    return get_config_manager().get_config(overrides, args.config)


def _output_result(
    result: GenerationResult,
    schemas: Dict[str, ObjectSchema],
    args: argparse.Namespace,
) -> int:
    """Print or write generated artifacts, then warnings and metadata."""
    if not result.success:
        console.print(
            f"[red]✗ Code generation failed:[/red] {escape(str(result.error_message))}"
        )
        return 1

    if args.output_dir:
        written = write_artifacts(result, Path(args.output_dir))
        for path in written:
            console.print(f"[green]✓[/green] Wrote [cyan]{path}[/cyan]")
    else:
        for artifact in result.artifacts:
            console.print(
                Panel(
                    Syntax(artifact.source_text, "java", theme="monokai"),
                    title=f"📄 {artifact.file_name}",
                    border_style="green",
                    expand=False,
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
            if isinstance(value, list):
                value = ", ".join(value)
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    logger.info(
        "Generated %d class(es) from %d schema(s)", len(result.artifacts), len(schemas)
    )
    return 0


def write_artifacts(result: GenerationResult, output_dir: Path) -> List[Path]:
    """
    Write each artifact below a source root following its package.

    Returns:
        Paths written, in artifact order
    """
    written = []
    for artifact in result.artifacts:
        path = output_dir / Path(*artifact.relative_path.parts)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(artifact.source_text, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)
        written.append(path)
    return written


def _handle_languages(args: argparse.Namespace) -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(language, info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _handle_field_types(args: argparse.Namespace) -> int:
    """Show which accessors each field type produces."""
    table = Table(title="🔧 Field Types", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Type", style="bold green", no_wrap=True)
    table.add_column("Accessors", style="cyan")
    table.add_column("Return Types", style="blue")

    for field_type in FieldType:
        accessors, returns = FIELD_TYPE_ACCESSORS[field_type]
        table.add_row(field_type.value, accessors, returns)

    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())

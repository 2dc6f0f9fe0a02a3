"""
Command-line interface for JSON to code generation.

Reads a JSON sample from a file, a URL or standard input and prints or
writes the generated declarations.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core import pipeline
from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.generator import CodeGenerator, GeneratorError
from .core.templates import TemplateError
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_supported_languages,
)
from .utils import JSONLoaderError, load_json_text

logger = get_logger(__name__)

# Status messages go to stderr so generated code can be piped
console = Console(stderr=True)

SYNTAX_LEXERS = {"typescript": "typescript", "java": "java"}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-to-code",
        description="Generate TypeScript interfaces or Java DTOs from a JSON sample",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-to-code order.json --root-name Order
  json-to-code -l java --suffix Omie -o OrderDto.java order.json
  json-to-code -l ts --split models/ < order.json
  json-to-code --list-languages
        """.strip(),
    )

    parser.add_argument(
        "file", nargs="?", help="JSON file to read ('-' or omitted: standard input)"
    )
    parser.add_argument("--url", help="URL to fetch JSON from")
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds for --url (default: 30)",
    )

    # Core generation options
    parser.add_argument(
        "--language",
        "-l",
        default="typescript",
        help="Target language (default: typescript)",
    )
    parser.add_argument(
        "--root-name",
        "-r",
        default="Root",
        help="Name of the root declaration (default: Root)",
    )
    parser.add_argument(
        "--suffix",
        "-s",
        default="",
        help="Suffix appended to every declaration name",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output", "-o", help="Write all declarations to this file"
    )
    output_group.add_argument(
        "--split",
        metavar="DIR",
        help="Write one file per declaration into this directory",
    )

    # Configuration
    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Configuration file path (JSON)")
    config_group.add_argument("--indent", type=int, help="Indent size in spaces")
    config_group.add_argument(
        "--tabs", action="store_true", help="Indent with tabs instead of spaces"
    )

    ts_group = parser.add_argument_group("TypeScript-specific options")
    ts_group.add_argument(
        "--no-export",
        action="store_true",
        help="Don't add 'export' to interfaces",
    )

    java_group = parser.add_argument_group("Java-specific options")
    java_group.add_argument(
        "--package-name", "--package", help="Java package of the generated classes"
    )
    java_group.add_argument(
        "--no-lombok", action="store_true", help="Don't add Lombok annotations"
    )
    java_group.add_argument(
        "--json-include",
        help="Jackson JsonInclude policy (default: NON_NULL, 'none' to omit)",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show inferred declarations and warnings",
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    info_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.list_languages:
            return _list_languages()

        if not is_language_supported(args.language):
            console.print(f"[red]✗ Unsupported language '{args.language}'[/red]")
            console.print(
                "[dim]Supported languages: "
                f"{', '.join(list_supported_languages())}[/dim]"
            )
            return 1

        generator = get_generator(args.language, _build_config(args))
        source, json_text = load_json_text(args.file, args.url, args.timeout)
        logger.info("Generating %s code from %s", generator.language_name, source)

        if args.split:
            _write_file_set(generator, json_text, args)
        else:
            code = pipeline.generate_document(
                json_text, generator, args.root_name, args.suffix
            )
            _output_document(generator, code, args.output)

        if args.verbose:
            _show_schema(generator, json_text, args)

        return 0

    except (
        GeneratorError,
        ConfigError,
        RegistryError,
        TemplateError,
        JSONLoaderError,
        FileNotFoundError,
    ) as e:
        logger.error("Code generation failed: %s", e)
        console.print(f"[red]✗[/red] {escape(str(e))}")
        return 1


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    language = get_registry().resolve_language(args.language)
    overrides = {}

    if args.indent is not None:
        overrides["indent_size"] = args.indent

    if args.tabs:
        overrides["use_tabs"] = True

    if args.no_export:
        overrides["export_declarations"] = False

    if args.package_name:
        overrides["package_name"] = args.package_name

    if args.no_lombok:
        overrides["use_lombok"] = False

    if args.json_include:
        include = args.json_include.upper()
        overrides["json_include"] = None if include == "NONE" else include

    config = load_config(language, custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config, language):
        console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

    return config


def _output_document(generator: CodeGenerator, code: str, output: Optional[str]):
    """Write the document to a file or print it."""
    if output:
        output_path = Path(output)
        try:
            output_path.write_text(code + "\n", encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated {generator.language_name} code saved to "
            f"[cyan]{output_path}[/cyan]"
        )
        return

    if sys.stdout.isatty():
        lexer = SYNTAX_LEXERS.get(generator.language_name, "text")
        Console().print(Syntax(code, lexer, theme="monokai"))
    else:
        sys.stdout.write(code + "\n")


def _write_file_set(
    generator: CodeGenerator, json_text: str, args: argparse.Namespace
):
    """Write one file per declaration."""
    files = pipeline.generate_file_set(
        json_text, generator, args.root_name, args.suffix
    )

    directory = Path(args.split)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for generated in files:
            (directory / generated.file_name).write_text(
                generated.content + "\n", encoding="utf-8"
            )
    except OSError as e:
        raise GeneratorError(f"Failed to write files to {directory}: {e}") from e

    console.print(
        f"[green]✓[/green] Wrote {len(files)} file(s) to [cyan]{directory}[/cyan]"
    )


def _show_schema(generator: CodeGenerator, json_text: str, args: argparse.Namespace):
    """Show inferred declarations and validation warnings."""
    schema = pipeline.infer_schema(json_text, generator, args.root_name, args.suffix)

    table = Table(
        title="📊 Inferred Declarations",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Declaration", style="bold green")
    table.add_column("Fields", justify="right")
    table.add_column("Depends On", style="blue")

    for declaration in schema.declarations:
        name = declaration.name
        if name == schema.root_name:
            name = f"{name} [dim](root)[/dim]"
        table.add_row(
            name,
            str(len(declaration.fields)),
            ", ".join(declaration.dependencies) or "[dim]none[/dim]",
        )

    console.print()
    console.print(table)

    for source, target in schema.skipped_edges:
        console.print(
            f"[dim]↻ cycle {source} -> {target} not used for ordering[/dim]"
        )

    warnings = generator.validate_declarations(schema.declarations)
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        console.print()


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Naming", style="magenta")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            info["name"], info["file_extension"], info["naming"], info["class"], aliases
        )

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] json-to-code [dim]input.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan] --root-name [cyan]NAME[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0

"""
Command-line interface for recordgen.

Reads a schema (or mapping-rules) document and generates record
definitions for one or more target languages.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    get_registry,
    load_config,
    load_schema,
)
from .codegen.core.generator import generate_code
from .codegen.core.schema import Schema
from .codegen.registry import RegistryError
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_json, load_json_from_text

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Generated code goes to stdout; status and errors go to stderr
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="recordgen",
        description="Generate typed record definitions from a record schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  recordgen schema.json -l python
  recordgen rules.json -l go -l rust -o generated/
  recordgen --stdin -l kotlin --package com.example.dto < schema.json
  recordgen --list-languages
  recordgen --language-info swift
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema or mappings JSON file")
    input_group.add_argument("--url", help="URL to fetch the document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the document from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--language",
        "-l",
        action="append",
        dest="languages",
        metavar="LANGUAGE",
        help="Target language (repeatable)",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Output file, or directory when several languages are given "
        "(default: stdout)",
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--name",
        default="Record",
        help="Root record name for mapping documents (default: Record)",
    )
    parser.add_argument("--package", dest="package_name", help="Package/namespace name")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit descriptions as comments",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging and generation metadata",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    return parser


def main(argv: List[str] | None = None) -> int:
    """Entry point of the recordgen console script."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not args.languages:
            err_console.print("[red]✗[/red] --language is required for code generation")
            return 1

        if not (args.file or args.url or args.stdin):
            err_console.print(
                "[red]✗[/red] Input source required (file, --url, or --stdin)"
            )
            return 1

        document = _get_input_data(args)
        schema = load_schema(document, name=args.name)
        logger.info("Loaded schema with %d record(s)", len(schema))

        results = _generate_all(schema, args)
        return _output_results(results, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except GeneratorError as e:
        err_console.print(f"[red]✗ Invalid schema:[/red] {escape(str(e))}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    registry = get_registry()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in registry.list_languages():
        info = registry.get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(language, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] recordgen [dim]schema.json[/dim] -l [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] recordgen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    registry = get_registry()

    if not registry.is_supported(language):
        err_console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        err_console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = registry.get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    generator = registry.create_generator(language)
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")
    config_table.add_row("Package Name", str(generator.config.package_name))
    config_table.add_row("Indent Size", str(generator.config.indent_size))
    config_table.add_row("Add Comments", str(generator.config.add_comments))
    config_table.add_row("Field Naming", info["naming_convention"])
    config_table.add_row("Type Naming", info["type_naming_convention"])
    config_table.add_row("Optional Wrapper", info["optional_wrapper"])
    config_table.add_row("Any Type", info["any_type"])
    config_table.add_row("Reserved Words", str(info["reserved_word_count"]))

    console.print()
    console.print(config_table)
    return 0


def _get_input_data(args: argparse.Namespace) -> Any:
    """Get the JSON document from the selected input source."""
    try:
        if args.file:
            return load_json(file_path=args.file)[1]
        elif args.url:
            return load_json(url=args.url)[1]
        else:
            return load_json_from_text(sys.stdin.read())[1]
    except JSONLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build a language's configuration from the config file and CLI options."""
    overrides: Dict[str, Any] = {}
    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.no_comments:
        overrides["add_comments"] = False

    return load_config(language, custom_config=overrides, config_file=args.config)


def _generate_all(schema: Schema, args: argparse.Namespace) -> Dict[str, GenerationResult]:
    """Generate code for every requested language, keeping going after failures."""
    registry = get_registry()
    results: Dict[str, GenerationResult] = {}

    for requested in args.languages:
        try:
            language = registry.resolve_language(requested)
            generator = registry.create_generator(language, _build_config(args, language))
        except (RegistryError, GeneratorError) as e:
            logger.error("Cannot create %s generator: %s", requested, e)
            results[requested] = GenerationResult.error(str(e), exception=e)
            continue

        results[language] = generate_code(generator, schema)

    return results


def _output_results(results: Dict[str, GenerationResult], args: argparse.Namespace) -> int:
    """Write or print each result and report failures per language."""
    failed = 0
    output = Path(args.output) if args.output else None
    to_directory = output is not None and (len(results) > 1 or output.is_dir())

    if to_directory:
        output.mkdir(parents=True, exist_ok=True)

    for language, result in results.items():
        if not result.success:
            failed += 1
            kind = type(result.exception).__name__ if result.exception else "Error"
            err_console.print(
                f"[red]✗ {language}:[/red] {kind}: {escape(result.error_message)}"
            )
            continue

        if output is None:
            _print_code(language, result)
        else:
            path = output / _output_filename(args, result) if to_directory else output
            try:
                path.write_text(result.code, encoding="utf-8")
            except OSError as e:
                failed += 1
                err_console.print(f"[red]✗ Failed to write {path}:[/red] {e}")
                continue
            err_console.print(
                f"[green]✓[/green] Generated {language} code saved to [cyan]{path}[/cyan]"
            )

        if args.verbose and result.metadata:
            _print_metadata(result)

        if result.warnings:
            for warning in result.warnings:
                logger.warning("%s: %s", language, warning)

    return 1 if failed else 0


def _output_filename(args: argparse.Namespace, result: GenerationResult) -> str:
    roots = result.metadata.get("root_records") or [args.name]
    return f"{roots[-1]}{result.metadata['file_extension']}"


def _print_code(language: str, result: GenerationResult) -> None:
    """Print generated code, highlighted on a terminal and raw otherwise."""
    if not console.is_terminal:
        sys.stdout.write(result.code)
        return

    border = "═" * 20
    console.print(f"[green]{border} 📄 Generated {language.title()} Code {border}[/green]\n")
    console.print(Syntax(result.code, language, theme="monokai"))
    console.print()


def _print_metadata(result: GenerationResult) -> None:
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

    err_console.print()
    err_console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for the metagen converter."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cdm_metagen import __version__
from cdm_metagen.cli.exception_handler import handle_exceptions
from cdm_metagen.logging_config import setup_logging
from cdm_metagen.models import LoaderError, Schema, load_schema, validate_schema_file

# Create Typer app
app = typer.Typer(
    name="metagen",
    help="Generate DAML type declarations from a parsed Rosetta CDM schema.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"metagen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate DAML type declarations from a Rosetta CDM schema.

    The schema is the parsed form of the Rosetta sources (classes, enums and
    their attributes) stored as YAML or JSON.
    """


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Schema YAML/JSON file to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output errors, no success messages.",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat warnings as errors.",
        ),
    ] = False,
) -> None:
    """Validate a schema file and the type model built from it.

    Checks the file structure first, then normalizes the schema and runs the
    consistency checks (unresolved types, duplicate names, reserved words).

    Examples
    --------
        metagen validate cdm.yaml
        metagen validate cdm.yaml --quiet
        metagen validate cdm.yaml --format table
        metagen validate cdm.yaml --format tree

    """
    from cdm_metagen.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from cdm_metagen.transform import CyclicInheritanceError, SchemaToIRTransformer
    from cdm_metagen.validation import ModelValidator

    # First validate file structure
    errors = validate_schema_file(input_file)

    if errors:
        error_console.print(f"\n[bold red]✗ Validation failed for {input_file.name}[/bold red]\n")

        table = Table(title="Validation Errors", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Location", style="cyan")
        table.add_column("Error", style="red")

        for i, error in enumerate(errors, 1):
            if ": " in error:
                loc, msg = error.split(": ", 1)
            else:
                loc, msg = "", error
            table.add_row(str(i), loc, msg)

        console.print(table)
        raise typer.Exit(code=1)

    schema = load_schema(input_file)

    try:
        module = SchemaToIRTransformer().transform(input_file.stem, schema)
    except CyclicInheritanceError as e:
        error_console.print(f"\n[bold red]✗ {e}[/bold red]\n")
        raise typer.Exit(code=1) from None

    result = ModelValidator(strict=strict).validate(module)
    failed = not result.is_valid or (strict and bool(result.warnings))

    if not result.is_valid or result.warnings:
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console).format_validation_result(result, module.name)

        if failed:
            raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")


def _print_summary(schema: Schema) -> None:
    """Print a summary of the schema contents."""
    table = Table(title="Schema Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    if schema.namespace:
        table.add_row("Namespace", schema.namespace)

    classes = schema.classes
    enums = schema.enums
    table.add_row("Classes", str(len(classes)))
    table.add_row("Enums", str(len(enums)))
    table.add_row("Attributes", str(sum(len(c.fields) for c in classes)))
    table.add_row("Enum values", str(sum(len(e.values) for e in enums)))

    derived = sum(1 for c in classes if c.base) + sum(1 for e in enums if e.base)
    table.add_row("With base", str(derived))

    if schema.others:
        kinds = sorted({other.kind for other in schema.others})
        table.add_row("Ignored", f"{len(schema.others)} ({', '.join(kinds)})")

    console.print(table)


@app.command()
@handle_exceptions()
def convert(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Schema YAML/JSON file to convert.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    module_name: Annotated[
        str,
        typer.Option(
            "--module",
            "-m",
            help="Fully qualified name of the generated DAML module.",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path. Defaults to input filename with .daml extension.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Converter settings file (YAML/JSON).",
            exists=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite output file if it exists.",
        ),
    ] = False,
    validate_only: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Convert without writing the output file.",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat validation warnings as errors.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed conversion progress.",
        ),
    ] = False,
) -> None:
    """Convert a schema file to a DAML module.

    Loads the schema, flattens inheritance into a type model, checks it and
    renders every declaration as DAML source.

    Examples
    --------
        metagen convert cdm.yaml -m Org.Isda.Cdm.Classes
        metagen convert cdm.yaml -m Org.Isda.Cdm.Classes -o Classes.daml
        metagen convert cdm.yaml -m Org.Isda.Cdm.Classes --force
        metagen convert cdm.yaml -m Org.Isda.Cdm.Classes --dry-run
        metagen convert cdm.yaml -m Org.Isda.Cdm.Classes --config metagen.yaml

    """
    from rich.progress import Progress, SpinnerColumn, TextColumn

    from cdm_metagen.config import load_config
    from cdm_metagen.pipeline import build_module
    from cdm_metagen.render import DamlRenderer

    setup_logging("DEBUG" if verbose else "WARNING")

    # Determine output path
    if output is None:
        output = input_file.with_suffix(".daml")

    # Check if output exists
    if output.exists() and not force and not validate_only:
        error_console.print(
            f"\n[bold red]✗ Output file already exists: {output}[/bold red]\n"
            "Use --force to overwrite."
        )
        raise typer.Exit(code=1)

    config = load_config(config_file, strict=strict or None)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        # Step 1: Load
        task = progress.add_task("Loading schema...", total=None)
        schema = load_schema(input_file)
        progress.update(task, description="[green]✓ Loaded[/green]")

        if verbose:
            console.print(f"  [dim]Classes: {len(schema.classes)}[/dim]")
            console.print(f"  [dim]Enums: {len(schema.enums)}[/dim]")

        # Step 2: Normalize and check
        task = progress.add_task("Building type model...", total=None)
        module = build_module(module_name, schema, config)
        progress.update(task, description="[green]✓ Type model built[/green]")

        if verbose:
            console.print(f"  [dim]Declarations: {len(module.decls)}[/dim]")

        # Step 3: Render
        task = progress.add_task("Rendering DAML...", total=None)
        source = DamlRenderer(config).render(module)
        progress.update(task, description="[green]✓ Rendered[/green]")

    if validate_only:
        size = len(source.encode("utf-8"))
        console.print(f"\n[bold green]✓ Would write {size:,} bytes to {output}[/bold green]\n")
        return

    output.write_text(source, encoding="utf-8")
    file_size = output.stat().st_size
    console.print(f"\n[bold green]✓ Wrote {file_size:,} bytes to {output}[/bold green]\n")


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Schema YAML/JSON file to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display information about a schema file.

    Examples
    --------
        metagen info cdm.yaml

    """
    from pydantic import ValidationError

    try:
        schema = load_schema(input_file)
    except (LoaderError, ValidationError) as e:
        error_console.print(f"\n[bold red]✗ Failed to read file: {e}[/bold red]\n")
        raise typer.Exit(code=1) from None

    console.print(
        Panel.fit(
            f"[bold]Rosetta Schema[/bold]\nFile: {input_file}",
            title="File Info",
        )
    )

    _print_summary(schema)


if __name__ == "__main__":
    app()

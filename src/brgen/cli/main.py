"""
brgen CLI - Main entry point.

Provides commands for generating the BR class from a set of bindable
property names.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from brgen.config.loader import (
    ConfigurationError,
    collect_property_names,
    create_config_from_args,
    generate_default_config,
    load_config_from_yaml,
)
from brgen.config.models import BRGenConfig
from brgen.output.file_writer import BRFileWriter
from brgen.writer.br_writer import (
    ALL_PROPERTIES,
    ALL_PROPERTIES_INDEX,
    BR_CLASS_NAME,
    ReservedPropertyError,
    assign_indices,
    render_br,
)

app = typer.Typer(
    name="brgen",
    help="Generate the BR class that maps bindable properties to integer indices",
    no_args_is_help=True,
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")


def resolve_config(
    config: Optional[str],
    package: Optional[str],
    properties: Optional[list[str]],
    properties_file: Optional[str],
    use_final: Optional[bool],
    output: Optional[str],
) -> BRGenConfig:
    """Build the effective configuration; CLI options override YAML values."""
    if config:
        cfg = load_config_from_yaml(Path(config))
        updates = {}
        if package:
            updates["package_name"] = package
        if use_final is not None:
            updates["use_final"] = use_final
        if updates:
            cfg.generation = cfg.generation.model_copy(update=updates)
        if properties:
            cfg.properties = [*cfg.properties, *properties]
        if properties_file:
            cfg.properties_file = Path(properties_file)
        if output:
            cfg.output.output_dir = Path(output)
        return cfg

    return create_config_from_args(
        package_name=package,
        properties=properties,
        properties_file=Path(properties_file) if properties_file else None,
        use_final=True if use_final is None else use_final,
        output_dir=Path(output) if output else Path("./generated"),
    )


def print_error(error: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")


# =============================================================================
# Commands
# =============================================================================


@app.command()
def generate(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to configuration YAML file"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Java package of the BR class"),
    prop: Optional[list[str]] = typer.Option(None, "--property", help="Bindable property name (repeatable)"),
    properties_file: Optional[str] = typer.Option(
        None, "--properties-file", "-f", help="Text file with one property name per line"
    ),
    use_final: Optional[bool] = typer.Option(None, "--final/--no-final", help="Declare constants as final"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output root directory"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the source instead of writing it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Generate BR.java for a set of bindable properties.

    Examples:
        brgen generate -p com.example.app --property age --property name
        brgen generate -c brgen.yaml --no-final
        brgen generate -p com.example.app -f properties.txt --dry-run
    """
    configure_logging(verbose)

    try:
        cfg = resolve_config(config, package, prop, properties_file, use_final, output)
        names = collect_property_names(cfg)
        source = render_br(names, cfg.generation)
    except (ConfigurationError, ReservedPropertyError) as e:
        print_error(e)
        raise typer.Exit(1)

    if dry_run:
        typer.echo(source, nl=False)
        return

    result = BRFileWriter(cfg.output.output_dir).write(cfg.generation.package_name, source)
    if result.changed:
        console.print(f"[green]✓[/green] Wrote {result.path} ({len(names)} properties)")
    else:
        console.print(f"[dim]{result.path} is up to date[/dim]")


@app.command()
def show(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to configuration YAML file"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Java package of the BR class"),
    prop: Optional[list[str]] = typer.Option(None, "--property", help="Bindable property name (repeatable)"),
    properties_file: Optional[str] = typer.Option(
        None, "--properties-file", "-f", help="Text file with one property name per line"
    ),
    use_final: Optional[bool] = typer.Option(None, "--final/--no-final", help="Declare constants as final"),
):
    """
    Show the index assigned to each property without writing anything.
    """
    configure_logging(False)

    try:
        cfg = resolve_config(config, package, prop, properties_file, use_final, None)
        names = collect_property_names(cfg)
    except ConfigurationError as e:
        print_error(e)
        raise typer.Exit(1)

    table = Table(title=f"{cfg.generation.package_name}.{BR_CLASS_NAME}")
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Property", style="bold")

    table.add_row(str(ALL_PROPERTIES_INDEX), f"{ALL_PROPERTIES} [dim](all properties)[/dim]")
    for entry in assign_indices(names):
        style = "red" if entry.name == ALL_PROPERTIES else None
        table.add_row(str(entry.index), entry.name, style=style)

    console.print(table)
    if ALL_PROPERTIES in names:
        console.print(
            f"[yellow]⚠ '{ALL_PROPERTIES}' is reserved; generate will reject this property set[/yellow]"
        )


@app.command()
def init(
    output: str = typer.Option("./brgen.yaml", "--output", "-o", help="Output path for config file"),
):
    """
    Generate a default configuration file.

    Creates a brgen.yaml with sensible defaults that you can customize.
    """
    output_path = Path(output)

    if output_path.exists():
        if not typer.confirm(f"{output} already exists. Overwrite?"):
            console.print("[yellow]Cancelled.[/yellow]")
            raise typer.Abort()

    generate_default_config(output_path)
    console.print(
        Panel(
            f"[green]Configuration written to {output_path}[/green]\n"
            "Edit the package name and properties, then run [bold]brgen generate -c "
            f"{output_path}[/bold]",
            title="brgen init",
            border_style="green",
        )
    )


# =============================================================================
# Entry Point
# =============================================================================


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

"""Entry point for the svcdocs command line."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from .config import ConfigLoader, load_config
from .docs import InterfaceClosure
from .generator import DocsGenerator
from .io import DocsWriter, ServiceLoader, ServiceLoadError
from .models import Service

app = typer.Typer(
    help="Generate Markdown reference docs for service interfaces.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_service(service_file: Path) -> Service:
    try:
        return ServiceLoader().load(service_file)
    except ServiceLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("generate")
def generate(
    service_file: Path = typer.Argument(..., help="Service IR file (YAML or JSON)"),
    output: Path = typer.Option(
        None, "--output", "-o", help="Output directory (overrides config)"
    ),
    project: Path = typer.Option(
        None, "--project", "-p", help="Directory containing svcdocs.yaml"
    ),
    no_banner: bool = typer.Option(
        False, "--no-banner", help="Omit the generated-file banner"
    ),
    workers: int = typer.Option(
        None, "--workers", "-w", min=1, help="Interfaces rendered in parallel"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render one Markdown document per interface.

    Examples:
        svcdocs generate service.yaml
        svcdocs generate service.json --output site/api --workers 4
    """
    _configure_logging(verbose)

    config = load_config(project)
    updates: dict[str, object] = {}
    if output is not None:
        updates["output_dir"] = str(output)
    if no_banner:
        updates["banner"] = False
    if workers is not None:
        updates["settings"] = config.settings.model_copy(update={"max_workers": workers})
    if updates:
        config = config.model_copy(update=updates)

    service = _load_service(service_file)
    files = DocsGenerator(service, config).build()
    for path in DocsWriter().write(files, config.output_dir):
        typer.echo(str(path))


@app.command("closure")
def closure(
    service_file: Path = typer.Argument(..., help="Service IR file (YAML or JSON)"),
    interface: str = typer.Argument(..., help="Interface name"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show the types, enums and unions an interface reaches."""
    _configure_logging(verbose)

    service = _load_service(service_file)
    target = service.get_interface(interface)
    if target is None:
        typer.echo(f"Error: interface not found: {interface}", err=True)
        raise typer.Exit(code=1)

    result = InterfaceClosure(service, target)
    sections = [
        ("Input types", result.input_types),
        ("Output types", result.output_types),
        ("Types", result.types),
        ("Input enums", result.input_enums),
        ("Output enums", result.output_enums),
        ("Enums", result.enums),
        ("Input unions", result.input_unions),
        ("Output unions", result.output_unions),
        ("Unions", result.unions),
    ]
    for label, entities in sections:
        names = ", ".join(entity.name for entity in entities) or "-"
        typer.echo(f"{label}: {names}")


@app.command("init")
def init(
    project: Path = typer.Option(
        None, "--project", "-p", help="Directory to write svcdocs.yaml into"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a starter svcdocs.yaml with the default settings."""
    try:
        path = ConfigLoader(project).write_starter(force=force)
    except FileExistsError as e:
        typer.echo(f"Error: {e} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(path))


def main():
    """Run svcdocs."""
    app()


if __name__ == "__main__":
    main()

"""CLI interface for dotbuild using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from slugify import slugify

from dotbuild import __description__, __version__
from dotbuild.config import LogLevel, load_config
from dotbuild.description import load_description
from dotbuild.errors import DotbuildError, ExecutableNotFound
from dotbuild.render import GraphvizRenderer, OutputFormat, view

app = typer.Typer(
    name="dotbuild",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

_FORMAT_DESCRIPTIONS = {
    OutputFormat.SVG: "Scalable vector graphics",
    OutputFormat.PNG: "Portable network graphics",
    OutputFormat.JPG: "JPEG image",
    OutputFormat.PDF: "Portable document format",
    OutputFormat.DOT: "Laid-out DOT source with positions",
}


def _setup_logging(level: str) -> None:
    """Route library logging through Rich at the given level."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"dotbuild version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output to stderr")
    ] = False,
) -> None:
    """dotbuild - Build Graphviz DOT documents and render them."""
    if verbose:
        _setup_logging(LogLevel.DEBUG.value)


@app.command()
def source(
    description: Annotated[
        Path,
        typer.Argument(help="Graph description JSON file")
    ],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
) -> None:
    """Print the DOT source for a graph description."""
    try:
        graph = load_description(description).to_graph()
    except DotbuildError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    text = graph.source
    if out:
        try:
            out.write_text(text, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]DOT source written:[/green] {out}")
    else:
        typer.echo(text, nl=False)


@app.command()
def render(
    description: Annotated[
        Path,
        typer.Argument(help="Graph description JSON file")
    ],
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format (default: from config, else svg)")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: <graph name>.<format> in the output dir)")
    ] = None,
    engine: Annotated[
        Optional[str],
        typer.Option("--engine", "-e", help="Graphviz layout engine executable (default: dot)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .dotbuild.json)")
    ] = None,
    open_file: Annotated[
        bool,
        typer.Option("--open", help="Open the rendered file with the default viewer")
    ] = False,
) -> None:
    """Render a graph description to an image with Graphviz."""
    try:
        dotbuild_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not logging.getLogger().handlers:
        _setup_logging(dotbuild_config.logging.level)

    format = format or dotbuild_config.render.format
    renderer = GraphvizRenderer(
        engine=engine or dotbuild_config.render.engine,
        timeout=dotbuild_config.render.timeout,
    )

    try:
        graph = load_description(description).to_graph()
        console.print(f"[dim]Rendering {len(graph.nodes)} nodes and {len(graph.edges)} edges as {format.value}...[/dim]")
        data = graph.render(format, renderer)
    except ExecutableNotFound as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print("[dim]Install Graphviz or pass --engine with the path to its executable[/dim]")
        raise typer.Exit(1)
    except DotbuildError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if out:
        output_file = out.resolve()
    else:
        stem = slugify(graph.name or description.stem) or "graph"
        output_file = Path(dotbuild_config.output.dir).resolve() / f"{stem}{format.suffix}"

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_bytes(data)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[green]Graph rendered:[/green] {output_file}")

    if open_file or dotbuild_config.output.open:
        view(output_file)


@app.command()
def formats() -> None:
    """List the supported output formats."""
    table = Table(title="Output formats")
    table.add_column("Format", style="cyan")
    table.add_column("Suffix")
    table.add_column("Description")

    for output_format in OutputFormat:
        table.add_row(output_format.value, output_format.suffix, _FORMAT_DESCRIPTIONS[output_format])

    console.print(table)


if __name__ == "__main__":
    app()

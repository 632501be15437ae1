"""Command-line interface for inspecting and converting raw data values."""

from __future__ import annotations

import logging
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rawdata.config import ReaderConfig
from rawdata.content import read_content
from rawdata.errors import RawDataError
from rawdata.formats import Format
from rawdata.io import dump_value, write_output
from rawdata.params import RawDataParamType

app = typer.Typer(
    name="rawdata",
    help="Detect and decode inline or @file JSON/YAML values.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = {"json": Format.JSON, "yaml": Format.YAML}


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Detect and decode inline or @file JSON/YAML values."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command("detect")
def detect_cmd(
    value: str = typer.Argument(..., help="Inline JSON/YAML or @path to a file"),
    max_bytes: int | None = typer.Option(
        None,
        "--max-bytes",
        help="Reject referenced files larger than this many bytes",
    ),
) -> None:
    """Show the detected format and size of a value without decoding it."""
    try:
        content = read_content(value, ReaderConfig(max_bytes=max_bytes))
    except RawDataError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from None

    table = Table(title="Detected Content")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Source", style="green")
    table.add_column("Bytes", style="dim", justify="right")
    table.add_row(content.format.value, content.source or "(inline)", str(len(content.data)))

    console.print(table)


@app.command("decode")
def decode_cmd(
    value: Any = typer.Argument(
        ...,
        click_type=RawDataParamType(),
        help="Inline JSON/YAML or @path to a file",
    ),
    to: str = typer.Option(
        "json",
        "--to",
        "-t",
        help="Output format: 'json' or 'yaml'",
    ),
    output_path: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file instead of stdout",
    ),
) -> None:
    """Decode a value, report its shape and print it in the chosen format."""
    fmt = OUTPUT_FORMATS.get(to.lower())
    if fmt is None:
        err_console.print(f"[red]Error:[/red] Unknown output format '{to}' (use json or yaml)")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Shape:[/cyan] {value.shape.value}")

    if output_path:
        write_output(output_path, value, fmt)
        err_console.print(f"[green]✓ Wrote {fmt.value} to {output_path}[/green]")
        return

    # Plain write so the document can be piped
    typer.echo(dump_value(value, fmt), nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""Command-line interface for bytesz."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import default_config_path, load_config, write_default_config
from .errors import ByteSizeParseError
from .formatter import format_size
from .log import setup_logger
from .parser import parse_size


app = typer.Typer(
    name="bytesz",
    help="Format byte counts and parse human-readable sizes",
    add_completion=False,
)
console = Console()


def format_record(size: int) -> Dict[str, Any]:
    """Format one byte count into an output record."""
    try:
        return {"bytes": size, "display": format_size(size), "error": None}
    except ValueError as e:
        return {"bytes": size, "display": None, "error": str(e)}


def parse_record(text: str) -> Dict[str, Any]:
    """Parse one size string into an output record."""
    try:
        size = parse_size(text)
    except ByteSizeParseError as e:
        return {"input": text, "bytes": None, "display": None, "error": str(e), "kind": e.kind.name}
    return {"input": text, "bytes": size, "display": format_size(size), "error": None, "kind": None}


def build_table(title: str, records: List[Dict[str, Any]], columns: List[str]) -> Table:
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column.capitalize(), overflow="fold", justify="right" if column == "bytes" else "left")
    table.add_column("Error", overflow="fold")
    for record in records:
        cells = ["-" if record[column] is None else escape(str(record[column])) for column in columns]
        error = f"[red]{escape(record['error'])}[/red]" if record["error"] else ""
        table.add_row(*cells, error)
    return table


def _emit(ctx: typer.Context, title: str, records: List[Dict[str, Any]], columns: List[str], json_output: bool) -> None:
    if json_output or ctx.obj["config"].json:
        typer.echo(json.dumps(records, ensure_ascii=False, indent=2))
    else:
        ctx.obj["console"].print(build_table(title, records, columns))


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file (default: $BYTESZ_CONFIG or ~/.config/bytesz/config.toml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug messages to stderr",
    ),
):
    """Format byte counts and parse human-readable sizes."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Cannot load config: {escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    setup_logger("DEBUG" if verbose else cfg.log_level, cfg.log_file or None)
    logger.debug(f"Loaded config: {cfg}")
    ctx.obj = {"config": cfg, "console": Console(no_color=not cfg.color)}


@app.command("format")
def format_command(
    ctx: typer.Context,
    sizes: List[int] = typer.Argument(..., help="Byte counts to format"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
):
    """Show byte counts as SI-prefixed sizes (e.g. 2335 -> 2.34 kB)."""
    records = [format_record(size) for size in sizes]
    _emit(ctx, "bytesz format", records, ["bytes", "display"], json_output)
    if any(record["error"] for record in records):
        raise typer.Exit(code=1)


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    texts: List[str] = typer.Argument(..., help="Size strings to parse, e.g. '1.5 MB' or 4KiB"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
):
    """Parse size strings into exact byte counts."""
    records = [parse_record(text) for text in texts]
    _emit(ctx, "bytesz parse", records, ["input", "bytes", "display"], json_output)
    failed = sum(1 for record in records if record["error"])
    if failed:
        logger.warning(f"{failed} of {len(records)} sizes could not be parsed")
        raise typer.Exit(code=1)


@app.command("init-config")
def init_config_command(
    ctx: typer.Context,
    target: Optional[Path] = typer.Argument(None, help="Where to write the config file (default: ~/.config/bytesz/config.toml)"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing file",
    ),
):
    """Write the default configuration file."""
    out = ctx.obj["console"]
    target = target or default_config_path()
    if target.expanduser().exists() and not force:
        out.print(f"[yellow]Config already exists: {target}[/yellow] (use --force to overwrite)")
        raise typer.Exit(code=1)
    path = write_default_config(target)
    out.print(f"[green]Wrote config:[/green] {path}")


if __name__ == "__main__":  # pragma: no cover
    app()

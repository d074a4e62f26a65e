from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from src.config import get_settings
from src.engine import run_queries
from src.input_reader import InputFormatError, available_formats, read_input
from src.reporter import print_records, render_json, render_text
from src.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Player Run Queries CLI.")
log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"records={settings.record_count} format={settings.input_format}"
    )


@app.command()
def query(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read input from this file instead of stdin.",
    ),
    input_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Input format (lines, csv). Defaults to settings.",
    ),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of records in lines input (default from settings).",
    ),
    player_type: Optional[str] = typer.Option(
        None,
        "--player-type",
        "-p",
        help="Player type for the lowest-runs query (overrides the input line).",
    ),
    match_type: Optional[str] = typer.Option(
        None,
        "--match-type",
        "-m",
        help="Match type for the filter query (overrides the input line).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the query report as JSON."),
    show_table: bool = typer.Option(False, "--table", help="Show parsed records as a table."),
) -> None:
    """
    Read player records and answer the lowest-runs and match-type queries.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    fmt = input_format or settings.input_format
    if fmt not in available_formats():
        raise typer.BadParameter(
            f"'{fmt}' is not one of: {', '.join(available_formats())}", param_hint="--format"
        )
    record_count = settings.record_count if count is None else count

    text = input_path.read_text(encoding="utf-8") if input_path else sys.stdin.read()
    try:
        parsed = read_input(text, input_format=fmt, count=record_count)
    except InputFormatError as exc:
        log.error("Invalid input", extra={"line": exc.line, "reason": exc.reason})
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if show_table:
        print_records(parsed.records)

    report = run_queries(
        parsed.records,
        player_type=player_type if player_type is not None else parsed.player_type,
        match_type=match_type if match_type is not None else parsed.match_type,
    )

    if as_json:
        typer.echo(render_json(report))
        return
    for line in render_text(report):
        typer.echo(line)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

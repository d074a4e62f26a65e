from __future__ import annotations

import json
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from src.domain.models import PlayerRecord
from src.engine import QueryReport

NO_SUCH_PLAYER = "No such player"
NO_MATCH_TYPE = "No player found for the given match type"


def format_lowest_runs(value: Optional[int]) -> str:
    """Text for a lowest-runs result."""
    return NO_SUCH_PLAYER if value is None else str(value)


def format_match_ids(ids: List[int]) -> List[str]:
    """One line per identifier, or the no-match message."""
    if not ids:
        return [NO_MATCH_TYPE]
    return [str(player_id) for player_id in ids]


def render_text(report: QueryReport) -> List[str]:
    """
    Render a report as plain output lines.

    Skipped queries (no query value given) produce no lines.
    """
    lines: List[str] = []
    if report["player_type"] is not None:
        lines.append(format_lowest_runs(report["lowest_runs"]))
    if report["match_type"] is not None:
        lines.extend(format_match_ids(report["match_ids"] or []))
    return lines


def render_json(report: QueryReport) -> str:
    return json.dumps(dict(report), indent=2)


def print_records(records: Iterable[PlayerRecord], console: Optional[Console] = None) -> None:
    """
    Render player records as a rich table.
    """
    console = console or Console()
    rows = list(records)

    if not rows:
        console.print("[yellow]No player records to display.[/yellow]")
        return

    table = Table(
        title="Player Records",
        box=box.ROUNDED,
        caption=f"{len(rows)} record(s) in input order",
    )
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Runs", justify="right", style="bold green")
    table.add_column("Player Type", style="yellow")
    table.add_column("Match Type", style="blue")

    for record in rows:
        table.add_row(
            str(record.id),
            record.name,
            f"{record.runs:,}",
            record.player_type,
            record.match_type,
        )

    console.print(table)


__all__ = [
    "NO_MATCH_TYPE",
    "NO_SUCH_PLAYER",
    "format_lowest_runs",
    "format_match_ids",
    "print_records",
    "render_json",
    "render_text",
]

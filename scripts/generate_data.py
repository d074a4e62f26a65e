"""
Data generation script for Player Run Queries.

Writes deterministic pseudo-random player records in either the five-lines-
per-record layout (optionally followed by query lines) or CSV.
"""

from __future__ import annotations

import csv
import random
import sys
from pathlib import Path
from typing import List, Optional

import typer

from src.domain.models import PlayerRecord
from src.input_reader import RECORD_FIELDS, available_formats

app = typer.Typer(help="Generate synthetic player records for the query CLI.")

PLAYER_TYPES = ["bat", "bowl", "allrounder", "keeper"]
MATCH_TYPES = ["T20", "ODI", "Test"]
_NAMES = ["Arjun", "Ben", "Chris", "Dev", "Eoin", "Faf", "Glenn", "Hashim", "Imam", "Jos"]


def _generate_records(rows: int, seed: int) -> List[PlayerRecord]:
    rng = random.Random(seed)
    ids = rng.sample(range(1, max(rows * 10, 10) + 1), rows)
    return [
        PlayerRecord(
            id=player_id,
            name=f"{rng.choice(_NAMES)} {index + 1}",
            runs=rng.randint(0, 12_000),
            player_type=rng.choice(PLAYER_TYPES),
            match_type=rng.choice(MATCH_TYPES),
        )
        for index, player_id in enumerate(ids)
    ]


def _write_lines(
    path: Path,
    records: List[PlayerRecord],
    player_type: Optional[str],
    match_type: Optional[str],
) -> None:
    with path.open("w", encoding="utf-8") as f:
        for record in records:
            for field_name in RECORD_FIELDS:
                f.write(f"{getattr(record, field_name)}\n")
        if player_type is not None:
            f.write(f"{player_type}\n")
            if match_type is not None:
                f.write(f"{match_type}\n")


def _write_csv(path: Path, records: List[PlayerRecord]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(RECORD_FIELDS)
        writer.writerows(
            [getattr(record, field_name) for field_name in RECORD_FIELDS] for record in records
        )


@app.command()
def main(
    rows: int = typer.Option(4, "--rows", "-r", min=0, help="Number of records to generate."),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
    output_format: str = typer.Option("lines", "--format", "-f", help="lines or csv."),
    output: Path = typer.Option(Path("players.txt"), "--output", "-o", help="Output path."),
    player_type: Optional[str] = typer.Option(
        "bat", "--player-type", help="Query line appended to lines output."
    ),
    match_type: Optional[str] = typer.Option(
        "T20", "--match-type", help="Query line appended to lines output."
    ),
) -> None:
    """
    Generate synthetic player records.
    """
    if output_format not in available_formats():
        raise typer.BadParameter(
            f"'{output_format}' is not one of: {', '.join(available_formats())}",
            param_hint="--format",
        )
    output.parent.mkdir(parents=True, exist_ok=True)
    records = _generate_records(rows, seed)

    if output_format == "csv":
        _write_csv(output, records)
    else:
        _write_lines(output, records, player_type, match_type)
    typer.echo(f"Wrote {rows} record(s) -> {output} (format={output_format}, seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)

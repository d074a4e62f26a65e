"""
Input readers that turn raw text into a record collection plus query values.

Two formats are supported:

- ``lines``: five lines per record (id, name, runs, player type, match type),
  followed by an optional player-type query line and match-type query line.
- ``csv``: a header row naming the record fields, one record per row. Query
  values are supplied separately by the caller.

Usage:
    from src.input_reader import read_input

    parsed = read_input(sys.stdin.read(), input_format="lines", count=4)
    print(len(parsed.records), parsed.player_type, parsed.match_type)
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from src.domain.models import PlayerRecord, RecordCollection
from src.utils.logging import get_logger

log = get_logger(__name__)

RECORD_FIELDS = ("id", "name", "runs", "player_type", "match_type")
_INTEGER_FIELDS = frozenset({"id", "runs"})
_FIELD_ALIASES = {"player_type": "playerType", "match_type": "matchType"}


class InputFormatError(ValueError):
    """
    Raised when input text cannot be turned into player records.

    Attributes
    ----------
    line : int | None
        1-based line number the problem was found on, when known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        self.reason = message
        super().__init__(f"line {line}: {message}" if line is not None else message)


@dataclass(frozen=True)
class ParsedInput:
    """Records plus the query values found alongside them (if any)."""

    records: RecordCollection
    player_type: Optional[str] = None
    match_type: Optional[str] = None


def _parse_int(raw: str, field_name: str, line: int) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InputFormatError(f"{field_name} must be an integer, got {raw!r}", line=line) from None


def _build_record(values: Dict[str, Any], line: int) -> PlayerRecord:
    try:
        return PlayerRecord.model_validate(values)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise InputFormatError(f"invalid player record ({errors})", line=line) from exc


def read_lines(lines: Iterable[str], count: int) -> ParsedInput:
    """
    Parse the five-lines-per-record layout.

    Parameters
    ----------
    lines : iterable[str]
        Input lines; surrounding whitespace is stripped from each.
    count : int
        Number of records to read before the query lines.

    Returns
    -------
    ParsedInput
        The records and up to two trailing query values.
    """
    if count < 0:
        raise ValueError(f"Record count must be >= 0, got {count}")

    stripped = [line.strip() for line in lines]
    records: List[PlayerRecord] = []
    cursor = 0

    for index in range(1, count + 1):
        start_line = cursor + 1
        values: Dict[str, Any] = {}
        for field_name in RECORD_FIELDS:
            if cursor >= len(stripped):
                raise InputFormatError(
                    f"record {index} of {count} is missing field '{field_name}'",
                    line=cursor + 1,
                )
            raw = stripped[cursor]
            cursor += 1
            if field_name in _INTEGER_FIELDS:
                values[field_name] = _parse_int(raw, field_name, line=cursor)
            else:
                values[field_name] = raw
        records.append(_build_record(values, line=start_line))

    trailing = stripped[cursor:]
    player_type = trailing[0] if len(trailing) > 0 else None
    match_type = trailing[1] if len(trailing) > 1 else None
    extra = [value for value in trailing[2:] if value]
    if extra:
        log.warning(
            "Ignoring trailing input lines after query values",
            extra={"ignored_lines": len(extra), "first_ignored_line": cursor + 3},
        )

    log.debug("Parsed lines input", extra={"records": len(records)})
    return ParsedInput(
        records=RecordCollection.from_records(records),
        player_type=player_type,
        match_type=match_type,
    )


def read_csv(text: str) -> ParsedInput:
    """
    Parse CSV text with a header row into records.

    Headers may use either snake_case (``player_type``) or camelCase
    (``playerType``) names. Every row is read; no query values are returned.
    """
    reader = csv.DictReader(io.StringIO(text))
    if reader.fieldnames is None:
        raise InputFormatError("missing CSV header row", line=1)

    header = {name.strip() for name in reader.fieldnames if name is not None}
    missing = [
        field_name
        for field_name in RECORD_FIELDS
        if field_name not in header and _FIELD_ALIASES.get(field_name) not in header
    ]
    if missing:
        raise InputFormatError(f"missing CSV column(s): {', '.join(missing)}", line=1)

    records: List[PlayerRecord] = []
    for row in reader:
        values = {
            key.strip(): value.strip()
            for key, value in row.items()
            if key is not None and value is not None
        }
        records.append(_build_record(values, line=reader.line_num))

    log.debug("Parsed CSV input", extra={"records": len(records)})
    return ParsedInput(records=RecordCollection.from_records(records))


def _reader_factories(count: int) -> Dict[str, Callable[[str], ParsedInput]]:
    """Registry of available input formats."""
    return {
        "lines": lambda text: read_lines(text.splitlines(), count),
        "csv": lambda text: read_csv(text),
    }


def available_formats() -> List[str]:
    """List available input format names."""
    return sorted(_reader_factories(0).keys())


def read_input(text: str, input_format: str = "lines", count: int = 4) -> ParsedInput:
    """Parse ``text`` using the named input format."""
    factories = _reader_factories(count)
    if input_format not in factories:
        raise ValueError(
            f"Unknown input format '{input_format}'. Available: {', '.join(available_formats())}"
        )
    return factories[input_format](text)


__all__ = [
    "RECORD_FIELDS",
    "InputFormatError",
    "ParsedInput",
    "available_formats",
    "read_csv",
    "read_input",
    "read_lines",
]

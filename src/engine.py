"""
Query engine: runs the lowest-runs and match-type queries over a collection.

Usage (example from CLI):
    from src.engine import run_queries

    report = run_queries(records, player_type="bat", match_type="T20")
    print(report["lowest_runs"], report["match_ids"])

A query whose argument is None is skipped and reported as not requested.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, TypedDict

from src.domain.models import PlayerRecord, RecordCollection
from src.queries import find_by_match_type, lowest_runs
from src.utils.logging import get_logger

log = get_logger(__name__)


class QueryReport(TypedDict):
    """
    Outcome of one engine run.

    ``lowest_runs`` is None both when the query was skipped and when nothing
    matched; ``player_type`` tells the two apart. The same holds for
    ``match_ids`` (None when skipped, [] when nothing matched).
    """

    records: int
    player_type: Optional[str]
    lowest_runs: Optional[int]
    match_type: Optional[str]
    match_ids: Optional[List[int]]


def run_queries(
    records: Iterable[PlayerRecord],
    player_type: Optional[str] = None,
    match_type: Optional[str] = None,
) -> QueryReport:
    """
    Run the requested queries and collect their results.

    Parameters
    ----------
    records : iterable[PlayerRecord]
        Records to query. Materialized once so both queries see the same snapshot.
    player_type : str | None
        Player type for the lowest-runs query; None skips it.
    match_type : str | None
        Match type for the filter query; None skips it.
    """
    collection = (
        records if isinstance(records, RecordCollection) else RecordCollection.from_records(records)
    )
    log.info(
        "[QUERIES START]",
        extra={"records": len(collection), "player_type": player_type, "match_type": match_type},
    )

    lowest: Optional[int] = None
    if player_type is not None:
        lowest = lowest_runs(collection, player_type)
        if lowest is None:
            log.info("No record matched player type", extra={"player_type": player_type})

    match_ids: Optional[List[int]] = None
    if match_type is not None:
        match_ids = find_by_match_type(collection, match_type)
        if not match_ids:
            log.info("No record matched match type", extra={"match_type": match_type})

    log.info(
        "[QUERIES COMPLETE]",
        extra={
            "lowest_runs": lowest,
            "matches": len(match_ids) if match_ids is not None else None,
        },
    )
    return QueryReport(
        records=len(collection),
        player_type=player_type,
        lowest_runs=lowest,
        match_type=match_type,
        match_ids=match_ids,
    )


__all__ = ["QueryReport", "run_queries"]

"""
Query functions over a player record collection.

Both queries are pure single-pass scans. "No match" is reported as a value
(`None` or an empty list) so it can never be mistaken for real data.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from src.domain.models import PlayerRecord


def lowest_runs(records: Iterable[PlayerRecord], player_type: str) -> Optional[int]:
    """
    Return the minimum run total among records of ``player_type``.

    Parameters
    ----------
    records : iterable[PlayerRecord]
        Records to scan. An empty iterable is valid.
    player_type : str
        Exact, case-sensitive player type to match.

    Returns
    -------
    int | None
        The lowest ``runs`` value, or None when no record matches.
    """
    lowest: Optional[int] = None
    for record in records:
        if record.player_type != player_type:
            continue
        if lowest is None or record.runs < lowest:
            lowest = record.runs
    return lowest


def find_by_match_type(records: Iterable[PlayerRecord], match_type: str) -> List[int]:
    """
    Return identifiers of records with ``match_type``, sorted ascending.

    An empty list means no record matched.
    """
    ids = [record.id for record in records if record.match_type == match_type]
    ids.sort()
    return ids


__all__ = ["lowest_runs", "find_by_match_type"]

"""
Domain models for Player Run Queries.

Defines the player record schema and the read-only collection the queries run
over. Records are immutable; a collection is built once from input and never
mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from pydantic import BaseModel, Field


class PlayerRecord(BaseModel):
    """
    A single player's identifier, name, run total, player type and match type.
    """

    id: int = Field(..., description="Player identifier (uniqueness is the caller's concern).")
    name: str = Field(..., description="Display name; not used by any query.")
    runs: int = Field(..., description="Run total. Zero and negative totals are valid data.")
    player_type: str = Field(..., alias="playerType", description="Category for lowest-runs.")
    match_type: str = Field(..., alias="matchType", description="Category for match filtering.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


@dataclass(frozen=True)
class RecordCollection:
    """
    Ordered, read-only sequence of player records.
    """

    records: Tuple[PlayerRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(cls, records: Iterable[PlayerRecord]) -> "RecordCollection":
        return cls(records=tuple(records))

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> PlayerRecord:
        return self.records[index]


__all__ = ["PlayerRecord", "RecordCollection"]

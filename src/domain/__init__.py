"""
Domain package for Player Run Queries.

Exports the core domain models used by the reader, the queries and the engine.
Keep this package focused on data definitions and validation concerns.
"""

from src.domain.models import PlayerRecord, RecordCollection

__all__ = [
    "PlayerRecord",
    "RecordCollection",
]

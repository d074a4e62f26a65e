"""
Player Run Queries - record model and queries over cricket player run totals.

This package reads a small set of player records (identifier, name, run total,
player type, match type) and answers two queries:

- The lowest run total among players of a given type
- The ascending list of player identifiers for a given match type

Absent results are reported as values (None or an empty list), never as
sentinel numbers.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from src.config import Settings, get_settings
from src.domain.models import PlayerRecord, RecordCollection
from src.engine import QueryReport, run_queries
from src.input_reader import InputFormatError, ParsedInput, read_input
from src.queries import find_by_match_type, lowest_runs
from src.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "PlayerRecord",
    "RecordCollection",
    # Queries
    "find_by_match_type",
    "lowest_runs",
    "QueryReport",
    "run_queries",
    # Input
    "InputFormatError",
    "ParsedInput",
    "read_input",
    # Logging
    "configure_logging",
    "get_logger",
]

"""
Pytest configuration for Player Run Queries.

Provides fixtures for:
- The reference four-player record set
- Reference lines-format input text
- Settings isolation (cache reset, quiet log level)
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Generator, List

import pytest

from src.config import get_settings
from src.domain.models import PlayerRecord, RecordCollection


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Pin settings-related environment and clear the settings cache around each test.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in ("APP_ENV", "JSON_LOGS", "PLAYER_RECORD_COUNT", "PLAYER_INPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # CLI runs install a stderr handler bound to the runner's (now closed) stream.
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.name == "default":
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def sample_records() -> RecordCollection:
    """
    The four-player scenario: two match types, three player types.
    """
    return RecordCollection.from_records(
        [
            PlayerRecord(id=1, name="A", runs=50, player_type="bat", match_type="T20"),
            PlayerRecord(id=2, name="B", runs=30, player_type="bat", match_type="ODI"),
            PlayerRecord(id=3, name="C", runs=70, player_type="bowl", match_type="T20"),
            PlayerRecord(id=4, name="D", runs=10, player_type="bat", match_type="T20"),
        ]
    )


@pytest.fixture
def sample_lines_text() -> str:
    """
    The four-player scenario in the five-lines-per-record layout, with query lines.
    """
    return "\n".join(
        [
            "1", "A", "50", "bat", "T20",
            "2", "B", "30", "bat", "ODI",
            "3", "C", "70", "bowl", "T20",
            "4", "D", "10", "bat", "T20",
            "bat",
            "T20",
        ]
    ) + "\n"


@pytest.fixture
def random_records() -> Callable[[int], List[PlayerRecord]]:
    """
    Factory for seeded random record sets with small category pools.
    """

    def _make(seed: int) -> List[PlayerRecord]:
        rng = random.Random(seed)
        size = rng.randint(0, 25)
        return [
            PlayerRecord(
                id=rng.randint(-5, 40),
                name=f"P{index}",
                runs=rng.randint(-100, 500),
                player_type=rng.choice(["bat", "bowl", "keeper"]),
                match_type=rng.choice(["T20", "ODI", "Test"]),
            )
            for index in range(size)
        ]

    return _make

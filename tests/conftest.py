"""
Dice 10000 - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from collections import deque
from typing import Iterable

import pytest

from src.config.settings import Settings
from src.engine.base import Phase, RoundState
from src.engine.collaborators import InMemoryHistoryLog, InMemoryLedger


class ScriptedDieSource:
    """Die source that replays a fixed list of faces."""

    def __init__(self, faces: Iterable[int] = ()) -> None:
        self.faces = deque(faces)
        self.rolled = 0

    def extend(self, faces: Iterable[int]) -> None:
        self.faces.extend(faces)

    def roll(self) -> int:
        if not self.faces:
            raise AssertionError("ScriptedDieSource ran out of faces")
        self.rolled += 1
        return self.faces.popleft()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSink:
    """Notification sink that keeps every message."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


def rolling_state(
    dice: tuple[int, ...],
    held: Iterable[int] = (),
    selected: Iterable[int] = (),
    banked_score: int = 0,
    bet: int = 100,
    roll_count: int = 0,
    min_to_board: int | None = None,
) -> RoundState:
    """Build a ROLLING state for rule and transition tests."""
    if min_to_board is None:
        min_to_board = 750 if banked_score > 0 else 1000
    return RoundState(
        phase=Phase.ROLLING,
        bet=bet,
        dice=tuple(dice),
        held=frozenset(held),
        selected=frozenset(selected),
        banked_score=banked_score,
        roll_count=roll_count,
        min_to_board=min_to_board,
    )


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_selections() -> dict[str, tuple[tuple[int, ...], int]]:
    """
    Selections with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points)
    """
    return {
        "empty": ((), 0),
        "single_one": ((1,), 100),
        "single_five": ((5,), 50),
        "one_and_five": ((1, 5), 150),
        "two_ones": ((1, 1), 200),
        "two_twos": ((2, 2), 0),
        "three_ones": ((1, 1, 1), 1000),
        "four_ones": ((1, 1, 1, 1), 1100),
        "five_ones": ((1, 1, 1, 1, 1), 1200),
        "three_fives": ((5, 5, 5), 500),
        "five_fives": ((5, 5, 5, 5, 5), 600),
        "three_twos": ((2, 2, 2), 200),
        "four_twos": ((2, 2, 2, 2), 400),
        "five_threes": ((3, 3, 3, 3, 3), 900),
        "three_sixes_and_one": ((6, 6, 6, 1), 700),
        "straight": ((1, 2, 3, 4, 5, 6), 1500),
        "straight_shuffled": ((6, 4, 2, 5, 3, 1), 1500),
        "six_fours": ((4, 4, 4, 4, 4, 4), 10000),
        "six_ones": ((1, 1, 1, 1, 1, 1), 10000),
        "two_triples": ((2, 2, 2, 3, 3, 3), 500),
    }


@pytest.fixture
def farkle_rolls() -> list[tuple[int, ...]]:
    """Active dice with nothing that scores."""
    return [
        (2,),
        (3, 4),
        (2, 3, 6),
        (2, 2, 3, 3),
        (2, 2, 3, 4, 6),
        (2, 2, 3, 3, 4, 6),
        (4, 4, 6, 6, 2, 3),
    ]


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================

@pytest.fixture
def source() -> ScriptedDieSource:
    return ScriptedDieSource()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger(balance=1000)


@pytest.fixture
def history() -> InMemoryHistoryLog:
    return InMemoryHistoryLog()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_bet=100,
        bet_step=50,
        min_bet=50,
        settlement_delay_seconds=3.0,
    )

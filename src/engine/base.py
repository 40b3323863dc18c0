"""
Dice 10000 - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a round
can be passed around, compared and serialized without a rendering harness.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any

# Table constants
NUM_DICE = 6
DIE_FACES = 6
UNROLLED = 0

# Round thresholds
TARGET_SCORE = 10000
FIRST_BOARD_MINIMUM = 1000
BANK_MINIMUM = 750
MAX_REMAINING_TO_BANK = 2

GAME_TYPE = "dice_10000"


class Phase(Enum):
    """Phases of a single round."""
    BETTING = "betting"
    ROLLING = "rolling"
    FINISHED = "finished"


class Outcome(Enum):
    """Terminal result of a round."""
    WIN = "win"
    LOSS = "loss"


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FIVE_OF_A_KIND = auto()
    SIX_OF_A_KIND = auto()
    FULL_STRAIGHT = auto()     # 1-2-3-4-5-6
    AUTO_WIN = auto()          # six identical dice


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a selection.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a selection of dice.

    Attributes:
        points: Total points scored
        breakdown: Individual scoring components
        is_auto_win: Six identical dice were selected
        is_straight: The selection is the full 1-6 straight
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...] = ()
    is_auto_win: bool = False
    is_straight: bool = False

    @property
    def has_scoring_dice(self) -> bool:
        """Returns True if the selection scored anything."""
        return self.points > 0

    def __str__(self) -> str:
        if not self.has_scoring_dice:
            return "No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class RoundState:
    """
    Complete state of a single player's round.

    Attributes:
        phase: Current phase of the round
        bet: Stake placed for this round (0 while betting)
        dice: Face values by position; 0 means not rolled yet
        held: Positions removed from play for the rest of the turn
        selected: Positions the player proposes to score or bank
        banked_score: Points banked this turn (not yet paid out)
        roll_count: Number of roll-again actions taken this turn
        min_to_board: Score needed by the first bank of the turn
        outcome: Terminal result, set only once the round is finished
    """
    phase: Phase = Phase.BETTING
    bet: int = 0
    dice: tuple[int, ...] = (UNROLLED,) * NUM_DICE
    held: frozenset[int] = field(default_factory=frozenset)
    selected: frozenset[int] = field(default_factory=frozenset)
    banked_score: int = 0
    roll_count: int = 0
    min_to_board: int = FIRST_BOARD_MINIMUM
    outcome: Outcome | None = None

    @property
    def is_unrolled(self) -> bool:
        """True while every die still shows the unrolled marker."""
        return all(value == UNROLLED for value in self.dice)

    @property
    def active_positions(self) -> tuple[int, ...]:
        """Positions still in play (not held), including selected ones."""
        return tuple(i for i in range(len(self.dice)) if i not in self.held)

    @property
    def active_values(self) -> tuple[int, ...]:
        """Values of dice still in play."""
        return tuple(self.dice[i] for i in self.active_positions)

    @property
    def held_values(self) -> tuple[int, ...]:
        """Values of the held dice."""
        return tuple(self.dice[i] for i in sorted(self.held))

    @property
    def selected_values(self) -> tuple[int, ...]:
        """Values of the currently selected dice."""
        return tuple(self.dice[i] for i in sorted(self.selected))

    @property
    def remaining_count(self) -> int:
        """Rolled dice that are neither held nor selected."""
        return sum(
            1 for i, v in enumerate(self.dice)
            if v > UNROLLED and i not in self.held and i not in self.selected
        )

    def evolve(self, **changes: Any) -> "RoundState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-friendly representation."""
        return {
            "phase": self.phase.value,
            "bet": self.bet,
            "dice": list(self.dice),
            "held": sorted(self.held),
            "selected": sorted(self.selected),
            "banked_score": self.banked_score,
            "roll_count": self.roll_count,
            "min_to_board": self.min_to_board,
            "outcome": self.outcome.value if self.outcome else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundState":
        """Rebuild a state produced by to_dict()."""
        from src.engine.validators import (
            validate_dice_layout,
            validate_positions,
            validate_round_state,
        )

        outcome = data.get("outcome")
        return validate_round_state(cls(
            phase=Phase(data["phase"]),
            bet=data.get("bet", 0),
            dice=validate_dice_layout(data.get("dice", (UNROLLED,) * NUM_DICE)),
            held=validate_positions(data.get("held", ())),
            selected=validate_positions(data.get("selected", ())),
            banked_score=data.get("banked_score", 0),
            roll_count=data.get("roll_count", 0),
            min_to_board=data.get("min_to_board", FIRST_BOARD_MINIMUM),
            outcome=Outcome(outcome) if outcome else None,
        ))


@dataclass(frozen=True)
class SettlementRecord:
    """
    Result of a finished round, handed to the ledger and audit log.

    Attributes:
        stake: Amount that was bet
        outcome: Win or loss
        payout: Amount to credit back (2x stake on win, 0 on loss)
        banked_score: Score reached when the round ended
        roll_count: Rolls taken during the round
        game_type: Identifier recorded in game history
    """
    stake: int
    outcome: Outcome
    payout: int
    banked_score: int = 0
    roll_count: int = 0
    game_type: str = GAME_TYPE

    def to_history_entry(self) -> dict[str, Any]:
        """Payload for the game-history service."""
        return {
            "gameType": self.game_type,
            "bet": self.stake,
            "outcome": self.outcome.value,
            "winAmount": self.payout,
        }

"""
Dice 10000 - Game Event Definitions

Event types and payloads emitted by the round state machine and the game
session. Collaborators (renderer, ledger, audit log) react to these; the
engine never calls them for presentation purposes.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a round."""

    BET_PLACED = auto()
    DICE_ROLLED = auto()
    SELECTION_CHANGED = auto()
    HOT_DICE = auto()
    SCORE_BANKED = auto()
    FARKLE = auto()
    GAME_WON = auto()
    ROUND_SETTLED = auto()
    RESET_SCHEDULED = auto()
    ROUND_RESET = auto()
    ACTION_REJECTED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    data: dict[str, Any] = field(default_factory=dict)


# Player-facing messages for the notification sink
FARKLE_MESSAGE = "Farkle! No scoring dice, you lose all unbanked points!"
GAME_OVER_MESSAGE = "Game over! No scoring dice left. Better luck next time."


def win_message(payout: int) -> str:
    """Congratulation shown after a win is credited."""
    return f"Congratulations! You've reached 10,000 points and won {payout} credits!"

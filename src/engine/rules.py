"""
Dice 10000 - Table Rules

Farkle detection and bank eligibility. Pure functions over dice values
and RoundState; nothing here rolls dice or changes state.
"""

from collections import Counter
from typing import Sequence

from src.engine.base import (
    BANK_MINIMUM,
    MAX_REMAINING_TO_BANK,
    UNROLLED,
    RoundState,
)
from src.engine.scoring import TenThousandScoring


def has_scoring_dice(active_values: Sequence[int]) -> bool:
    """
    Check whether any scoring die or combination is showing.

    Args:
        active_values: Values of the dice not held. A pending selection
            still counts as active.

    Returns:
        False when the roll is a farkle
    """
    rolled = [v for v in active_values if v != UNROLLED]

    if any(v in (1, 5) for v in rolled):
        return True

    if any(count >= 3 for count in Counter(rolled).values()):
        return True

    return TenThousandScoring.is_straight(tuple(rolled))


def is_farkle(state: RoundState) -> bool:
    """True when the dice still in play contain nothing that scores."""
    return not has_scoring_dice(state.active_values)


def selection_score(state: RoundState) -> int:
    """Score of the currently selected dice."""
    return TenThousandScoring.calculate_score(state.selected_values)


def required_bank_score(state: RoundState) -> int:
    """Minimum selection score needed to bank right now."""
    if state.banked_score == 0:
        return state.min_to_board
    return BANK_MINIMUM


def bank_block_reason(state: RoundState) -> str | None:
    """
    Explain why the current selection cannot be banked.

    Returns:
        A player-facing reason, or None when banking is allowed
    """
    if not state.selected:
        return "Select at least one scoring die to bank."

    if UNROLLED in state.selected_values:
        return "Roll the dice before banking."

    if state.remaining_count > MAX_REMAINING_TO_BANK:
        return "You need 2 or fewer dice remaining to bank."

    if selection_score(state) < required_bank_score(state):
        if state.banked_score == 0:
            return f"You need {state.min_to_board} points to get on the board."
        return f"You need at least {BANK_MINIMUM} points to bank."

    return None


def can_bank(state: RoundState) -> bool:
    """True when the selection may be banked."""
    return bank_block_reason(state) is None

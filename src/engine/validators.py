"""
Dice 10000 - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Iterable, Sequence

from src.engine.base import (
    BANK_MINIMUM,
    DIE_FACES,
    FIRST_BOARD_MINIMUM,
    NUM_DICE,
    UNROLLED,
    Phase,
    RoundState,
)


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int | None = NUM_DICE,
    allow_unrolled: bool = False,
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)
        allow_unrolled: Whether the unrolled marker (0) is accepted

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    lowest = UNROLLED if allow_unrolled else 1
    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (lowest <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {lowest} and {DIE_FACES}."
            )

    return values_tuple


def validate_dice_layout(values: Sequence[int]) -> tuple[int, ...]:
    """Validate a full table layout: exactly six dice, 0 allowed."""
    return validate_dice_values(
        values, min_count=NUM_DICE, max_count=NUM_DICE, allow_unrolled=True
    )


def validate_position(position: int, dice_count: int = NUM_DICE) -> int:
    """
    Validate a single die position.

    Raises:
        ValueError: If the position is not an integer in range
    """
    if not isinstance(position, int) or isinstance(position, bool):
        raise ValueError(f"Die position must be an integer, got {type(position).__name__}.")
    if not (0 <= position < dice_count):
        raise ValueError(
            f"Die position {position} is out of range. Must be between 0 and {dice_count - 1}."
        )
    return position


def validate_positions(
    positions: Iterable[int],
    dice_count: int = NUM_DICE
) -> frozenset[int]:
    """Validate a collection of die positions and return them as a frozenset."""
    return frozenset(validate_position(p, dice_count) for p in positions)


def validate_bet(amount: int, min_bet: int = 1) -> int:
    """
    Validate a stake.

    Args:
        amount: Stake to validate
        min_bet: Smallest accepted stake

    Returns:
        Validated amount

    Raises:
        ValueError: If the amount is not an integer or below the minimum
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise ValueError(f"Bet must be an integer, got {type(amount).__name__}.")

    if amount < max(min_bet, 1):
        raise ValueError(f"Bet must be at least {max(min_bet, 1)}, got {amount}.")

    return amount


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is invalid
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_round_state(state: RoundState) -> RoundState:
    """
    Check the invariants a stored round must satisfy.

    Raises:
        ValueError: If the state could not have been produced by play
    """
    overlap = state.held & state.selected
    if overlap:
        raise ValueError(f"Positions {sorted(overlap)} are both held and selected.")

    if state.min_to_board not in (FIRST_BOARD_MINIMUM, BANK_MINIMUM):
        raise ValueError(
            f"Minimum to board must be {FIRST_BOARD_MINIMUM} or {BANK_MINIMUM}, "
            f"got {state.min_to_board}."
        )

    if state.phase is Phase.FINISHED and state.outcome is None:
        raise ValueError("A finished round must have an outcome.")
    if state.phase is not Phase.FINISHED and state.outcome is not None:
        raise ValueError(f"A {state.phase.value} round cannot have an outcome.")

    validate_score(state.bet)
    validate_score(state.banked_score)
    validate_score(state.roll_count)
    return state

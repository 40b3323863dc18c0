"""
Dice 10000 - Score Calculator

Scores a selection of dice. All methods are stateless class methods that
operate on immutable inputs.

Scoring Rules:
    - Six of a kind: 10,000 points (automatic win, overrides everything)
    - 1-2-3-4-5-6 (Straight): 1,500 points
    - Single 1: 100 points
    - Single 5: 50 points
    - Three 1s: 1,000 points, +100 for each extra 1
    - Three 5s: 500 points, +50 for each extra 5
    - Three of X (2, 3, 4, 6): X × 100 points
    - Four of X: 2 × (X × 100), five of X: 3 × (X × 100)
"""

from collections import Counter
from typing import Sequence

from src.engine.base import (
    NUM_DICE,
    TARGET_SCORE,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from src.engine.validators import validate_dice_values

_STRAIGHT = (1, 2, 3, 4, 5, 6)

_SET_CATEGORIES = {
    3: ScoringCategory.THREE_OF_A_KIND,
    4: ScoringCategory.FOUR_OF_A_KIND,
    5: ScoringCategory.FIVE_OF_A_KIND,
    6: ScoringCategory.SIX_OF_A_KIND,
}


class TenThousandScoring:
    """
    Stateless score calculator for the 10,000 dice game.

    Order of detection matters: the six-of-a-kind win and the straight
    are only checked for full six-dice selections and short-circuit the
    per-face rules.
    """

    AUTO_WIN_POINTS = TARGET_SCORE
    STRAIGHT_POINTS = 1500
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    THREE_FIVES_POINTS = 500

    @classmethod
    def calculate_score(cls, values: Sequence[int]) -> int:
        """
        Score a selection of dice.

        Args:
            values: Face values of the selected dice (order irrelevant)

        Returns:
            Total points; 0 for an empty or non-scoring selection
        """
        return cls.score_breakdown(values).points

    @classmethod
    def score_breakdown(cls, values: Sequence[int]) -> ScoringResult:
        """
        Score a selection and explain where the points came from.

        Args:
            values: Face values of the selected dice

        Returns:
            ScoringResult with total points and per-combination breakdown
        """
        values = validate_dice_values(values, allow_unrolled=True)
        if not values:
            return ScoringResult(points=0)

        if cls.is_six_of_a_kind(values):
            return ScoringResult(
                points=cls.AUTO_WIN_POINTS,
                breakdown=(
                    ScoringBreakdown(
                        category=ScoringCategory.AUTO_WIN,
                        dice_values=values,
                        points=cls.AUTO_WIN_POINTS,
                        description=f"Six {values[0]}s (automatic win)",
                    ),
                ),
                is_auto_win=True,
            )

        if cls.is_straight(values):
            return ScoringResult(
                points=cls.STRAIGHT_POINTS,
                breakdown=(
                    ScoringBreakdown(
                        category=ScoringCategory.FULL_STRAIGHT,
                        dice_values=_STRAIGHT,
                        points=cls.STRAIGHT_POINTS,
                        description="Straight (1-2-3-4-5-6)",
                    ),
                ),
                is_straight=True,
            )

        breakdown: list[ScoringBreakdown] = []
        for face_value, count in sorted(Counter(values).items()):
            item = cls._score_face(face_value, count)
            if item is not None:
                breakdown.append(item)

        return ScoringResult(
            points=sum(item.points for item in breakdown),
            breakdown=tuple(breakdown),
        )

    @classmethod
    def is_six_of_a_kind(cls, values: Sequence[int]) -> bool:
        """Six dice showing the same value."""
        return len(values) == NUM_DICE and len(set(values)) == 1

    @classmethod
    def is_straight(cls, values: Sequence[int]) -> bool:
        """Exactly six dice forming 1-2-3-4-5-6."""
        return len(values) == NUM_DICE and tuple(sorted(values)) == _STRAIGHT

    @classmethod
    def _score_face(cls, face_value: int, count: int) -> ScoringBreakdown | None:
        """Points contributed by `count` dice showing `face_value`."""
        if count >= 3:
            extra = count - 3
            if face_value == 1:
                points = cls.THREE_ONES_POINTS + cls.SINGLE_ONE_POINTS * extra
            elif face_value == 5:
                points = cls.THREE_FIVES_POINTS + cls.SINGLE_FIVE_POINTS * extra
            else:
                # Four, five and six of a kind are 2x, 3x and 4x the set
                base = face_value * 100
                points = base * (1 + extra)
            if points == 0:
                return None
            return ScoringBreakdown(
                category=_SET_CATEGORIES[count],
                dice_values=(face_value,) * count,
                points=points,
                description=f"{count}x {face_value}s",
            )

        if face_value == 1:
            return ScoringBreakdown(
                category=ScoringCategory.SINGLE_ONE,
                dice_values=(1,) * count,
                points=cls.SINGLE_ONE_POINTS * count,
                description=f"{count}x Single 1{'s' if count > 1 else ''}",
            )

        if face_value == 5:
            return ScoringBreakdown(
                category=ScoringCategory.SINGLE_FIVE,
                dice_values=(5,) * count,
                points=cls.SINGLE_FIVE_POINTS * count,
                description=f"{count}x Single 5{'s' if count > 1 else ''}",
            )

        return None

"""
Dice 10000 - Table Rule Tests

Farkle detection and bank eligibility.
"""

import pytest

from conftest import rolling_state
from src.engine.rules import (
    bank_block_reason,
    can_bank,
    has_scoring_dice,
    is_farkle,
    required_bank_score,
    selection_score,
)


class TestHasScoringDice:

    @pytest.mark.parametrize("dice", [(1,), (5,), (2, 3, 1), (6, 6, 5)])
    def test_ones_and_fives_score(self, dice):
        assert has_scoring_dice(dice) is True

    @pytest.mark.parametrize("dice", [(2, 2, 2), (3, 6, 3, 3), (4, 4, 4, 4, 6, 6)])
    def test_three_of_a_kind_scores(self, dice):
        assert has_scoring_dice(dice) is True

    def test_straight_scores(self):
        assert has_scoring_dice((6, 5, 4, 3, 2, 1)) is True

    def test_farkle_rolls(self, farkle_rolls):
        for dice in farkle_rolls:
            assert has_scoring_dice(dice) is False, dice

    def test_no_dice_is_farkle(self):
        assert has_scoring_dice(()) is False

    def test_unrolled_dice_never_score(self):
        assert has_scoring_dice((0, 0, 0, 0, 0, 0)) is False


class TestIsFarkle:

    def test_held_dice_are_ignored(self):
        state = rolling_state((1, 1, 1, 2, 3, 4), held={0, 1, 2})
        assert is_farkle(state) is True

    def test_pending_selection_still_counts(self):
        state = rolling_state((1, 2, 3, 4, 6, 6), selected={0})
        assert is_farkle(state) is False


class TestSelectionScore:

    def test_scores_selected_positions_only(self):
        state = rolling_state((1, 1, 1, 5, 2, 3), selected={0, 1, 2})
        assert selection_score(state) == 1000

    def test_empty_selection(self):
        assert selection_score(rolling_state((1, 1, 1, 5, 2, 3))) == 0


class TestRequiredBankScore:

    def test_first_bank_needs_board_minimum(self):
        assert required_bank_score(rolling_state((1,) * 6)) == 1000

    def test_later_banks_need_750(self):
        assert required_bank_score(rolling_state((1,) * 6, banked_score=1000)) == 750


class TestCanBank:

    def test_empty_selection_cannot_bank(self):
        state = rolling_state((1, 1, 1, 1, 1, 2))
        assert can_bank(state) is False
        assert bank_block_reason(state) == "Select at least one scoring die to bank."

    def test_three_remaining_blocks_bank(self):
        state = rolling_state((1, 1, 1, 2, 3, 4), selected={0, 1, 2})
        assert selection_score(state) == 1000
        assert can_bank(state) is False
        assert bank_block_reason(state) == "You need 2 or fewer dice remaining to bank."

    def test_too_many_remaining_regardless_of_score(self):
        state = rolling_state((4, 4, 4, 4, 4, 4), selected={0, 1, 2})
        assert can_bank(state) is False

    def test_two_remaining_with_board_score(self):
        state = rolling_state((1, 1, 1, 5, 2, 3), selected={0, 1, 2, 3})
        assert state.remaining_count == 2
        assert can_bank(state) is True
        assert bank_block_reason(state) is None

    def test_held_dice_do_not_count_as_remaining(self):
        state = rolling_state((1, 1, 1, 6, 2, 3), held={0, 1, 2, 3}, selected={4})
        assert state.remaining_count == 1
        # 2 scores nothing, so the board minimum blocks it
        assert bank_block_reason(state) == "You need 1000 points to get on the board."

    def test_below_board_minimum(self):
        state = rolling_state((5, 5, 5, 1, 2, 3), selected={0, 1, 2, 3})
        assert selection_score(state) == 600
        assert can_bank(state) is False
        assert bank_block_reason(state) == "You need 1000 points to get on the board."

    def test_after_first_bank_750_is_enough(self):
        state = rolling_state((5, 5, 5, 1, 1, 3), selected={0, 1, 2, 3, 4}, banked_score=1000)
        assert selection_score(state) == 700
        assert bank_block_reason(state) == "You need at least 750 points to bank."

        state = rolling_state((5, 5, 5, 1, 5, 3), selected={0, 1, 2, 3, 4}, banked_score=1000)
        assert selection_score(state) == 650
        assert can_bank(state) is False

        state = rolling_state((6, 6, 6, 1, 5, 3), selected={0, 1, 2, 3, 4}, banked_score=1000)
        assert selection_score(state) == 750
        assert can_bank(state) is True

    def test_unrolled_dice_do_not_count_as_remaining(self):
        state = rolling_state((1, 1, 1, 0, 0, 0), selected={0, 1, 2})
        assert state.remaining_count == 0
        assert can_bank(state) is True

    def test_selected_unrolled_dice_cannot_bank(self):
        state = rolling_state((0,) * 6, selected=range(6))
        assert selection_score(state) == 10000
        assert can_bank(state) is False
        assert bank_block_reason(state) == "Roll the dice before banking."

"""
Dice 10000 - Outcome Resolver

Turns a finished round into a settlement record for the ledger and the
game-history log.
"""

from src.engine.base import GAME_TYPE, Outcome, Phase, RoundState, SettlementRecord
from src.engine.validators import validate_score


class OutcomeResolver:
    """Stateless settlement of finished rounds."""

    WIN_MULTIPLIER = 2

    @classmethod
    def payout_for(cls, stake: int, outcome: Outcome) -> int:
        """Win returns double the stake, loss returns nothing."""
        if outcome is Outcome.WIN:
            return stake * cls.WIN_MULTIPLIER
        return 0

    @classmethod
    def resolve(cls, state: RoundState) -> SettlementRecord:
        """
        Build the settlement record for a finished round.

        Args:
            state: Round in the FINISHED phase with an outcome

        Returns:
            SettlementRecord with stake, outcome and payout

        Raises:
            ValueError: If the round has not finished
        """
        if state.phase is not Phase.FINISHED or state.outcome is None:
            raise ValueError("Only a finished round can be settled.")

        stake = validate_score(state.bet)
        return SettlementRecord(
            stake=stake,
            outcome=state.outcome,
            payout=cls.payout_for(stake, state.outcome),
            banked_score=state.banked_score,
            roll_count=state.roll_count,
            game_type=GAME_TYPE,
        )

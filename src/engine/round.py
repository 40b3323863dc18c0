"""
Dice 10000 - Round State Machine

Drives a single player's round: Betting -> Rolling -> Finished -> Betting.

All methods are stateless class methods. The current RoundState is passed
in and a Transition carrying the next state is returned; nothing is stored.
Rejected actions raise a GameRuleError and leave the input state untouched.
"""

from dataclasses import dataclass, field

from src.engine.base import (
    BANK_MINIMUM,
    NUM_DICE,
    TARGET_SCORE,
    Outcome,
    Phase,
    RoundState,
    SettlementRecord,
)
from src.engine.dice import DieSource, roll_dice
from src.engine.errors import (
    EmptySelectionReroll,
    InvalidActionForPhase,
    InvalidSelection,
    InvalidSelectionForBank,
)
from src.engine.events import EventPayload, GameEvent
from src.engine.outcome import OutcomeResolver
from src.engine.rules import bank_block_reason, is_farkle, selection_score
from src.engine.validators import validate_bet, validate_position


@dataclass(frozen=True)
class Transition:
    """
    Result of an accepted action.

    Attributes:
        state: The next round state
        events: Events produced by the action, in order
        settlement: Set when the action finished the round
    """
    state: RoundState
    events: tuple[EventPayload, ...] = field(default_factory=tuple)
    settlement: SettlementRecord | None = None

    @property
    def is_terminal(self) -> bool:
        return self.settlement is not None


class RoundStateMachine:
    """
    Stateless engine for one round of 10,000.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def initial_state(cls) -> RoundState:
        """Fresh betting state with all dice unrolled."""
        return RoundState()

    @classmethod
    def place_bet(cls, state: RoundState, amount: int, source: DieSource) -> Transition:
        """
        Start a round with the given stake and roll all six dice.

        The stake must already be reserved by the ledger before the
        returned state is committed.

        Raises:
            InvalidActionForPhase: If the round is not in BETTING
            ValueError: If the amount is not a positive integer
        """
        cls._require_phase(state, Phase.BETTING, "place a bet")
        amount = validate_bet(amount)

        dice = roll_dice(source)
        new_state = RoundState(phase=Phase.ROLLING, bet=amount, dice=dice)

        return Transition(
            state=new_state,
            events=(
                EventPayload(GameEvent.BET_PLACED, {"bet": amount}),
                EventPayload(GameEvent.DICE_ROLLED, {"dice": list(dice), "held": []}),
            ),
        )

    @classmethod
    def toggle_selection(cls, state: RoundState, position: int) -> Transition:
        """
        Add a die to the selection, or remove it if already selected.

        Raises:
            InvalidActionForPhase: If the round is not in ROLLING
            InvalidSelection: If the die is held
            ValueError: If the position is out of range
        """
        cls._require_phase(state, Phase.ROLLING, "select dice")
        position = validate_position(position, len(state.dice))

        if position in state.held:
            raise InvalidSelection(f"Die {position} is held and cannot be selected.")

        selected = state.selected ^ frozenset({position})
        new_state = state.evolve(selected=selected)

        return Transition(
            state=new_state,
            events=(
                EventPayload(GameEvent.SELECTION_CHANGED, {
                    "selected": sorted(selected),
                    "score": selection_score(new_state),
                }),
            ),
        )

    @classmethod
    def roll_again(cls, state: RoundState, source: DieSource) -> Transition:
        """
        Hold the selected dice and roll the rest.

        Selected positions join the held set. When that holds all six
        dice, or nothing has been rolled yet, all six are rolled fresh and
        the held set is cleared (hot dice). Otherwise every position that
        was not held before this roll gets a new value, including the
        positions that were just moved into the held set.

        A roll with nothing scoring among the unheld dice is a farkle:
        the banked score is lost and the round finishes as a loss.

        Raises:
            InvalidActionForPhase: If the round is not in ROLLING
            EmptySelectionReroll: If no dice are selected
        """
        cls._require_phase(state, Phase.ROLLING, "roll again")
        if not state.selected:
            raise EmptySelectionReroll()

        newly_held = state.held | state.selected
        all_held = len(newly_held) == NUM_DICE
        events: list[EventPayload] = []

        if all_held or state.is_unrolled:
            dice = roll_dice(source)
            held: frozenset[int] = frozenset()
            if all_held:
                events.append(EventPayload(GameEvent.HOT_DICE, {}))
        else:
            # TODO: freeze held values once the re-roll of just-held dice is confirmed as a bug
            dice = tuple(
                state.dice[i] if i in state.held else source.roll()
                for i in range(NUM_DICE)
            )
            held = newly_held

        new_state = state.evolve(
            dice=dice,
            held=held,
            selected=frozenset(),
            roll_count=state.roll_count + 1,
        )
        events.append(EventPayload(GameEvent.DICE_ROLLED, {
            "dice": list(dice),
            "held": sorted(held),
        }))

        if is_farkle(new_state):
            return cls._finish(
                new_state.evolve(banked_score=0),
                Outcome.LOSS,
                events + [EventPayload(GameEvent.FARKLE, {"lost_score": state.banked_score})],
            )

        return Transition(state=new_state, events=tuple(events))

    @classmethod
    def bank_score(cls, state: RoundState, source: DieSource) -> Transition:
        """
        Bank the selected dice and start over with six fresh dice.

        The first bank of a round lowers the boarding minimum to 750.
        Reaching the target score finishes the round as a win.

        Raises:
            InvalidActionForPhase: If the round is not in ROLLING
            InvalidSelectionForBank: If the bank rule is not satisfied
        """
        cls._require_phase(state, Phase.ROLLING, "bank")
        reason = bank_block_reason(state)
        if reason is not None:
            raise InvalidSelectionForBank(reason)

        points = selection_score(state)
        banked = state.banked_score + points
        min_to_board = BANK_MINIMUM if state.banked_score == 0 else state.min_to_board

        banked_event = EventPayload(GameEvent.SCORE_BANKED, {
            "points": points,
            "banked_score": banked,
        })

        if banked >= TARGET_SCORE:
            finished = state.evolve(
                banked_score=banked,
                min_to_board=min_to_board,
                selected=frozenset(),
            )
            return cls._finish(
                finished,
                Outcome.WIN,
                [banked_event, EventPayload(GameEvent.GAME_WON, {"banked_score": banked})],
            )

        dice = roll_dice(source)
        new_state = state.evolve(
            dice=dice,
            held=frozenset(),
            selected=frozenset(),
            banked_score=banked,
            min_to_board=min_to_board,
        )
        return Transition(
            state=new_state,
            events=(
                banked_event,
                EventPayload(GameEvent.DICE_ROLLED, {"dice": list(dice), "held": []}),
            ),
        )

    @classmethod
    def reset(cls) -> Transition:
        """Return to betting with every field at its default."""
        return Transition(
            state=cls.initial_state(),
            events=(EventPayload(GameEvent.ROUND_RESET, {}),),
        )

    @classmethod
    def _finish(
        cls,
        state: RoundState,
        outcome: Outcome,
        events: list[EventPayload],
    ) -> Transition:
        """Move to FINISHED and attach the settlement record."""
        finished = state.evolve(phase=Phase.FINISHED, outcome=outcome)
        settlement = OutcomeResolver.resolve(finished)
        events.append(EventPayload(GameEvent.ROUND_SETTLED, {
            "stake": settlement.stake,
            "outcome": settlement.outcome.value,
            "payout": settlement.payout,
        }))
        return Transition(state=finished, events=tuple(events), settlement=settlement)

    @classmethod
    def _require_phase(cls, state: RoundState, phase: Phase, action: str) -> None:
        if state.phase is not phase:
            raise InvalidActionForPhase(action, state.phase)

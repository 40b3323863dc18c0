"""
Dice 10000 - Game Session

The action API for one player. A GameSession owns the committed RoundState
and wires the stateless RoundStateMachine to its collaborators:

    - the ledger debit must succeed before a bet opens a round
    - the ledger credit must succeed before a win is committed
    - finished rounds go to the history log (best effort)
    - player-facing messages go to the notification sink
    - the return to betting is a deadline checked by tick(), never a sleep

Every action returns an ActionResult. Rejections are reported in the
result and never change the committed state.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

from src.config.settings import Settings, get_settings
from src.engine.base import Outcome, Phase, RoundState, SettlementRecord
from src.engine.collaborators import HistoryLog, Ledger, NotificationSink
from src.engine.dice import DieSource, RandomDieSource
from src.engine.errors import (
    DiceRollFailed,
    EmptySelectionReroll,
    GameError,
    GameRuleError,
    InsufficientBalance,
    InvalidActionForPhase,
    LedgerCreditFailed,
    LedgerDebitFailed,
    LedgerError,
)
from src.engine.events import (
    FARKLE_MESSAGE,
    GAME_OVER_MESSAGE,
    EventPayload,
    GameEvent,
    win_message,
)
from src.engine.round import RoundStateMachine, Transition
from src.engine.rules import bank_block_reason, selection_score
from src.engine.scoring import TenThousandScoring
from src.engine.validators import validate_bet

logger = logging.getLogger(__name__)

# Rejections the player is told about through the notification sink
_NOTIFIED_ERRORS = (InsufficientBalance, LedgerError, EmptySelectionReroll, DiceRollFailed)


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of a submitted action.

    Attributes:
        accepted: Whether the action was applied
        state: Committed state after the action
        events: Events produced; a single ACTION_REJECTED when rejected
        reason: Player-facing rejection reason
        error: The rejection, when there was one
    """
    accepted: bool
    state: RoundState
    events: tuple[EventPayload, ...] = field(default_factory=tuple)
    reason: str | None = None
    error: GameError | None = None


@dataclass(frozen=True)
class SelectionPreview:
    """What the table shows for the current selection."""
    score: int
    remaining_count: int
    can_bank: bool
    block_reason: str | None
    hint: str | None = None
    combinations: tuple[str, ...] = ()


class GameSession:
    """Single-player 10,000 table."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        history: HistoryLog | None = None,
        notifier: NotificationSink | None = None,
        source: DieSource | None = None,
        clock: Callable[[], float] = time.monotonic,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        self.ledger = ledger
        self.history = history
        self.notifier = notifier
        self.source = source if source is not None else RandomDieSource()
        self._clock = clock
        self._bet_step = settings.bet_step
        self._min_bet = settings.min_bet
        self._settlement_delay = settings.settlement_delay_seconds
        self._current_bet = settings.default_bet
        self._state = RoundStateMachine.initial_state()
        self._reset_due_at: float | None = None
        self._listeners: list[Callable[[EventPayload], None]] = []

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def current_bet(self) -> int:
        """Stake that place_bet() uses when no amount is given."""
        return self._current_bet

    @property
    def reset_due_at(self) -> float | None:
        """Clock time at which a finished round returns to betting."""
        return self._reset_due_at

    def subscribe(self, callback: Callable[[EventPayload], None]) -> None:
        """Receive every event, including ACTION_REJECTED for rejected actions."""
        self._listeners.append(callback)

    # -- Betting ---------------------------------------------------------

    def increase_bet(self) -> ActionResult:
        """Raise the pending stake by one step, up to the balance."""
        if self._state.phase is not Phase.BETTING:
            return self._reject(InvalidActionForPhase("change the bet", self._state.phase))
        try:
            balance = self.ledger.balance()
        except Exception:
            logger.exception("Could not read balance")
            return self._reject(LedgerError("Balance is unavailable. Please try again."))
        if self._current_bet >= balance:
            return self._reject(GameRuleError("Bet cannot exceed your balance."))
        self._current_bet += self._bet_step
        return ActionResult(accepted=True, state=self._state)

    def decrease_bet(self) -> ActionResult:
        """Lower the pending stake by one step, down to the minimum bet."""
        if self._state.phase is not Phase.BETTING:
            return self._reject(InvalidActionForPhase("change the bet", self._state.phase))
        if self._current_bet <= self._min_bet:
            return self._reject(GameRuleError(f"Minimum bet is {self._min_bet}."))
        self._current_bet -= self._bet_step
        return ActionResult(accepted=True, state=self._state)

    def place_bet(self, amount: int | None = None) -> ActionResult:
        """
        Reserve the stake with the ledger and open a round.

        Args:
            amount: Stake to place; defaults to the pending bet
        """
        amount = self._current_bet if amount is None else amount
        try:
            if self._state.phase is not Phase.BETTING:
                raise InvalidActionForPhase("place a bet", self._state.phase)
            validate_bet(amount, self._min_bet)
            self._check_balance(amount)
            transition = self._attempt(
                lambda: RoundStateMachine.place_bet(self._state, amount, self.source)
            )
            self._debit_stake(amount)
        except GameError as exc:
            return self._reject(exc)
        except ValueError as exc:
            return self._reject(GameRuleError(str(exc)))

        self._current_bet = amount
        logger.info("Bet of %d placed", amount)
        return self._commit(transition)

    # -- Rolling ---------------------------------------------------------

    def toggle_selection(self, position: int) -> ActionResult:
        return self._run(lambda: RoundStateMachine.toggle_selection(self._state, position))

    def roll_again(self) -> ActionResult:
        return self._run(lambda: RoundStateMachine.roll_again(self._state, self.source))

    def bank_score(self) -> ActionResult:
        return self._run(lambda: RoundStateMachine.bank_score(self._state, self.source))

    def preview(self) -> SelectionPreview:
        """Score and bank eligibility of the current selection."""
        state = self._state
        if state.phase is not Phase.ROLLING:
            return SelectionPreview(
                score=0,
                remaining_count=0,
                can_bank=False,
                block_reason=None,
            )

        result = TenThousandScoring.score_breakdown(state.selected_values)
        hint = None
        if result.is_auto_win:
            hint = "Wow! You've got a winning combination!"
        elif result.is_straight:
            hint = "Nice! You've got a straight (1-2-3-4-5-6)!"

        reason = bank_block_reason(state)
        return SelectionPreview(
            score=selection_score(state),
            remaining_count=state.remaining_count,
            can_bank=reason is None,
            block_reason=reason,
            hint=hint,
            combinations=tuple(item.description for item in result.breakdown),
        )

    # -- Finished --------------------------------------------------------

    def tick(self) -> ActionResult:
        """Return to betting once the settlement delay has elapsed."""
        if self._reset_due_at is None or self._clock() < self._reset_due_at:
            return ActionResult(accepted=True, state=self._state)

        transition = RoundStateMachine.reset()
        self._state = transition.state
        self._reset_due_at = None
        logger.info("Round reset, back to betting")
        self._emit(transition.events)
        return ActionResult(accepted=True, state=self._state, events=transition.events)

    # -- Internals -------------------------------------------------------

    def _run(self, action: Callable[[], Transition]) -> ActionResult:
        """Apply an engine action and commit its transition."""
        try:
            transition = self._attempt(action)
            if transition.settlement is not None:
                self._pay_out(transition.settlement)
        except GameError as exc:
            return self._reject(exc)
        except ValueError as exc:
            return self._reject(GameRuleError(str(exc)))

        return self._commit(transition)

    def _attempt(self, action: Callable[[], Transition]) -> Transition:
        """Run an engine action. A failing die source becomes DiceRollFailed."""
        try:
            return action()
        except (GameError, ValueError):
            raise
        except Exception as exc:
            logger.exception("Die source failed")
            raise DiceRollFailed() from exc

    def _commit(self, transition: Transition) -> ActionResult:
        self._state = transition.state
        events = list(transition.events)

        if transition.settlement is not None:
            events.extend(self._after_settlement(transition.settlement))

        self._emit(events)
        return ActionResult(accepted=True, state=self._state, events=tuple(events))

    def _check_balance(self, amount: int) -> None:
        try:
            balance = self.ledger.balance()
        except Exception as exc:
            logger.exception("Could not read balance before bet")
            raise LedgerDebitFailed(amount) from exc
        if amount > balance:
            raise InsufficientBalance(amount, balance)

    def _debit_stake(self, amount: int) -> None:
        """Reserve the stake. Runs after the opening roll, before commit."""
        try:
            ok = self.ledger.debit(amount)
        except Exception as exc:
            logger.exception("Ledger debit of %d failed", amount)
            raise LedgerDebitFailed(amount) from exc
        if not ok:
            logger.warning("Ledger refused debit of %d", amount)
            raise LedgerDebitFailed(amount)

    def _pay_out(self, settlement: SettlementRecord) -> None:
        """Credit a win. Raises before anything is committed."""
        if settlement.payout <= 0:
            return
        try:
            ok = self.ledger.credit(settlement.payout)
        except Exception as exc:
            logger.exception("Ledger credit of %d failed", settlement.payout)
            raise LedgerCreditFailed(settlement.payout) from exc
        if not ok:
            logger.warning("Ledger refused credit of %d", settlement.payout)
            raise LedgerCreditFailed(settlement.payout)

    def _after_settlement(self, settlement: SettlementRecord) -> list[EventPayload]:
        self._record_history(settlement)

        if settlement.outcome is Outcome.WIN:
            logger.info("Round won, %d credited", settlement.payout)
            self._notify(win_message(settlement.payout))
        else:
            logger.info("Farkle, stake of %d lost", settlement.stake)
            self._notify(FARKLE_MESSAGE)
            self._notify(GAME_OVER_MESSAGE)

        self._reset_due_at = self._clock() + self._settlement_delay
        return [EventPayload(GameEvent.RESET_SCHEDULED, {
            "due_at": self._reset_due_at,
            "delay": self._settlement_delay,
        })]

    def _record_history(self, settlement: SettlementRecord) -> None:
        if self.history is None:
            return
        try:
            self.history.record(settlement.to_history_entry())
        except Exception:
            logger.exception("Failed to record game history")

    def _notify(self, message: str) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(message)
        except Exception:
            logger.exception("Notification sink failed")

    def _emit(self, events: Iterable[EventPayload]) -> None:
        for payload in events:
            for callback in self._listeners:
                try:
                    callback(payload)
                except Exception:
                    logger.exception("Event listener failed for %s", payload.event.name)

    def _reject(self, error: GameError) -> ActionResult:
        logger.debug("Rejected: %s", error.message)
        if isinstance(error, _NOTIFIED_ERRORS):
            self._notify(error.message)
        events = (EventPayload(GameEvent.ACTION_REJECTED, {
            "error": type(error).__name__,
            "reason": error.message,
        }),)
        self._emit(events)
        return ActionResult(
            accepted=False,
            state=self._state,
            events=events,
            reason=error.message,
            error=error,
        )

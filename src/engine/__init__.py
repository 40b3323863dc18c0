"""
Dice 10000 Game Engine.

Game logic with no UI or database dependencies. The rules and the round
state machine are pure Python; GameSession also reads src.config settings.
Handles dice rolling, scoring, farkle detection, banking and settlement.
"""

from src.engine.base import (
    Outcome,
    Phase,
    RoundState,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    SettlementRecord,
)
from src.engine.dice import DieSource, RandomDieSource
from src.engine.errors import (
    DiceRollFailed,
    EmptySelectionReroll,
    GameError,
    GameRuleError,
    InsufficientBalance,
    InvalidActionForPhase,
    InvalidSelection,
    InvalidSelectionForBank,
    LedgerCreditFailed,
    LedgerDebitFailed,
    LedgerError,
)
from src.engine.events import EventPayload, GameEvent
from src.engine.outcome import OutcomeResolver
from src.engine.round import RoundStateMachine, Transition
from src.engine.rules import can_bank, has_scoring_dice
from src.engine.scoring import TenThousandScoring
from src.engine.session import ActionResult, GameSession, SelectionPreview

__all__ = [
    # Data Classes
    "RoundState",
    "ScoringBreakdown",
    "ScoringResult",
    "SettlementRecord",
    "Transition",
    "ActionResult",
    "SelectionPreview",
    "EventPayload",
    # Enums
    "GameEvent",
    "Outcome",
    "Phase",
    "ScoringCategory",
    # Rules
    "TenThousandScoring",
    "can_bank",
    "has_scoring_dice",
    # Engines
    "RoundStateMachine",
    "OutcomeResolver",
    "GameSession",
    # Dice
    "DieSource",
    "RandomDieSource",
    # Errors
    "GameError",
    "GameRuleError",
    "InvalidActionForPhase",
    "EmptySelectionReroll",
    "InvalidSelection",
    "InvalidSelectionForBank",
    "InsufficientBalance",
    "LedgerError",
    "LedgerDebitFailed",
    "LedgerCreditFailed",
    "DiceRollFailed",
]

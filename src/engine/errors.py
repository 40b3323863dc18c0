"""
Dice 10000 - Engine Errors

Every rejection the engine can produce. Rule violations subclass ValueError
so callers that only know the validators' contract still catch them.
Each error carries a message suitable for showing to the player.
"""

from src.engine.base import Phase


class GameError(Exception):
    """Base class for all game errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GameRuleError(GameError, ValueError):
    """An action broke a game rule. The round is left untouched."""


class InvalidActionForPhase(GameRuleError):
    """Action submitted in a phase that forbids it."""

    def __init__(self, action: str, phase: Phase) -> None:
        super().__init__(f"Cannot {action} while the round is {phase.value}.")
        self.action = action
        self.phase = phase


class EmptySelectionReroll(GameRuleError):
    """Roll-again requested with nothing selected."""

    def __init__(self) -> None:
        super().__init__("You must select at least one die before rolling again!")


class InvalidSelection(GameRuleError):
    """Toggle targeted a die that cannot be selected."""


class InvalidSelectionForBank(GameRuleError):
    """Bank requested while the bank rule is not satisfied."""


class InsufficientBalance(GameRuleError):
    """Stake is larger than the available balance."""

    def __init__(self, amount: int, balance: int) -> None:
        super().__init__("Not enough credits to place this bet!")
        self.amount = amount
        self.balance = balance


class LedgerError(GameError):
    """The external ledger failed. The caller may retry."""


class LedgerDebitFailed(LedgerError):
    """Stake could not be reserved."""

    def __init__(self, amount: int) -> None:
        super().__init__("Failed to place bet. Please try again.")
        self.amount = amount


class LedgerCreditFailed(LedgerError):
    """Payout could not be credited."""

    def __init__(self, amount: int) -> None:
        super().__init__(f"Failed to credit {amount} credits. Please try again.")
        self.amount = amount


class DiceRollFailed(GameError):
    """The die source failed. Nothing was committed."""

    def __init__(self) -> None:
        super().__init__("The dice could not be rolled. Please try again.")

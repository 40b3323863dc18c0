"""
Dice 10000 - External Collaborators

Interfaces the game session talks to (balance ledger, game-history log,
notification sink) plus simple in-process implementations for local play
and tests. Supabase-backed implementations live in src.database.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Ledger(Protocol):
    """Owns the player's balance."""

    def balance(self) -> int:
        ...

    def debit(self, amount: int) -> bool:
        ...

    def credit(self, amount: int) -> bool:
        ...


@runtime_checkable
class HistoryLog(Protocol):
    """Audit trail of finished rounds."""

    def record(self, entry: dict[str, Any]) -> None:
        ...


@runtime_checkable
class NotificationSink(Protocol):
    """Receives player-facing messages. Display only."""

    def notify(self, message: str) -> None:
        ...


class InMemoryLedger:
    """Process-local balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = balance

    def balance(self) -> int:
        return self._balance

    def debit(self, amount: int) -> bool:
        if amount <= 0 or amount > self._balance:
            return False
        self._balance -= amount
        return True

    def credit(self, amount: int) -> bool:
        if amount < 0:
            return False
        self._balance += amount
        return True


class InMemoryHistoryLog:
    """Keeps history entries in a list."""

    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []

    def record(self, entry: dict[str, Any]) -> None:
        self.entries.append(dict(entry))


class LoggingNotificationSink:
    """Writes notifications to the log."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def notify(self, message: str) -> None:
        logger.log(self.level, "Notification: %s", message)

"""
Dice 10000 - In-process Collaborator Tests
"""

import logging

from src.engine.collaborators import (
    HistoryLog,
    InMemoryHistoryLog,
    InMemoryLedger,
    Ledger,
    LoggingNotificationSink,
    NotificationSink,
)


class TestInMemoryLedger:

    def test_satisfies_protocol(self):
        assert isinstance(InMemoryLedger(), Ledger)

    def test_debit_within_balance(self):
        ledger = InMemoryLedger(balance=100)
        assert ledger.debit(60) is True
        assert ledger.balance() == 40

    def test_debit_over_balance_refused(self):
        ledger = InMemoryLedger(balance=100)
        assert ledger.debit(150) is False
        assert ledger.balance() == 100

    def test_non_positive_debit_refused(self):
        assert InMemoryLedger(balance=100).debit(0) is False

    def test_credit(self):
        ledger = InMemoryLedger(balance=100)
        assert ledger.credit(200) is True
        assert ledger.balance() == 300


class TestInMemoryHistoryLog:

    def test_records_copies(self):
        log = InMemoryHistoryLog()
        assert isinstance(log, HistoryLog)
        entry = {"bet": 100}
        log.record(entry)
        entry["bet"] = 5
        assert log.entries == [{"bet": 100}]


class TestLoggingNotificationSink:

    def test_logs_message(self, caplog):
        sink = LoggingNotificationSink()
        assert isinstance(sink, NotificationSink)
        with caplog.at_level(logging.INFO, logger="src.engine.collaborators"):
            sink.notify("Farkle!")
        assert "Farkle!" in caplog.text

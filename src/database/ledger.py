"""
Dice 10000 - Supabase Ledger

Balance operations on the `players` table. Every write is a
compare-and-set on the current balance, so a debit either reserves the
whole stake or changes nothing.
"""

import logging

from supabase import Client

from src.database.models import PlayerBalance

logger = logging.getLogger(__name__)


class SupabaseLedger:
    """Ledger backed by a player's row in Supabase."""

    def __init__(self, client: Client, player_id: str) -> None:
        self.client = client
        self.player_id = player_id
        self.table = client.table("players")

    def get(self) -> PlayerBalance | None:
        """Fetch the player's balance row."""
        data = (
            self.table
            .select("*")
            .eq("id", self.player_id)
            .execute()
        )
        if data.data:
            return PlayerBalance.model_validate(data.data[0])
        return None

    def balance(self) -> int:
        """Current balance, 0 for an unknown player."""
        player = self.get()
        return player.balance if player else 0

    def debit(self, amount: int) -> bool:
        """Take `amount` from the balance if it is covered."""
        if amount <= 0:
            return False
        current = self.balance()
        if amount > current:
            return False
        return self._swap(current, current - amount)

    def credit(self, amount: int) -> bool:
        """Add `amount` to the balance."""
        if amount < 0:
            return False
        current = self.balance()
        return self._swap(current, current + amount)

    def _swap(self, expected: int, new_balance: int) -> bool:
        """Write the new balance only if nobody changed it in between."""
        data = (
            self.table
            .update({"balance": new_balance})
            .eq("id", self.player_id)
            .eq("balance", expected)
            .execute()
        )
        if not data.data:
            logger.warning(
                "Balance of player %s changed concurrently, expected %d",
                self.player_id, expected,
            )
            return False
        return True

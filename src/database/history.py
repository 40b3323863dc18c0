"""
Dice 10000 - Game History Manager

Writes settled rounds to the `game_history` table.
"""

from typing import Any

from supabase import Client

from src.database.models import GameHistoryEntry


class GameHistoryManager:
    """Manages game history records in Supabase."""

    def __init__(self, client: Client, player_id: str) -> None:
        self.client = client
        self.player_id = player_id
        self.table = client.table("game_history")

    def record(self, entry: dict[str, Any]) -> GameHistoryEntry:
        """Insert a settlement entry ({gameType, bet, outcome, winAmount})."""
        data = (
            self.table
            .insert({
                "player_id": self.player_id,
                "game_type": entry["gameType"],
                "bet": entry["bet"],
                "outcome": entry["outcome"],
                "win_amount": entry["winAmount"],
            })
            .execute()
        )
        return GameHistoryEntry.model_validate(data.data[0])

    def list_recent(self, limit: int = 20) -> list[GameHistoryEntry]:
        """Most recent rounds for the player, newest first."""
        data = (
            self.table
            .select("*")
            .eq("player_id", self.player_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [GameHistoryEntry.model_validate(row) for row in data.data]

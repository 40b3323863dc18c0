"""
Dice 10000 Database Layer.

Supabase integration for player balances and game history.
"""

from src.database.client import get_supabase_client
from src.database.history import GameHistoryManager
from src.database.ledger import SupabaseLedger
from src.database.models import GameHistoryEntry, PlayerBalance

__all__ = [
    "get_supabase_client",
    "GameHistoryEntry",
    "GameHistoryManager",
    "PlayerBalance",
    "SupabaseLedger",
]

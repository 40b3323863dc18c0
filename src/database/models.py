"""
Dice 10000 - Database Models

Pydantic models that mirror the Supabase table schemas.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class PlayerBalance(BaseModel):
    """Mirrors the `players` table."""

    id: UUID
    username: str = Field(max_length=30)
    balance: int = Field(default=0, ge=0)
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class GameHistoryEntry(BaseModel):
    """Mirrors the `game_history` table."""

    id: UUID | None = None
    player_id: UUID
    game_type: str
    bet: int = Field(ge=0)
    outcome: str
    win_amount: int = Field(default=0, ge=0)
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

"""Pydantic schemas for API requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class StrategySpec(BaseModel):
    """A named strategy, with its threshold where it takes one."""

    name: str = Field(..., min_length=1, description="Registered strategy name")
    limit: int | None = Field(default=None, ge=0, description="Threshold for stop_at")


# Game schemas
class PlayGameRequest(BaseModel):
    """Request to play a single game."""

    player: StrategySpec
    house: StrategySpec
    seed: int | None = None


class EventResponse(BaseModel):
    """One event from a played game."""

    event_type: str
    data: dict[str, Any]


class PlayGameResponse(BaseModel):
    """Result of a single game."""

    outcome: Literal["user_quit", "user_busted", "house_busted", "house_won", "user_won"]
    player_wins: bool
    player_up_card: int
    house_up_card: int
    player_tally: int
    house_tally: int
    events: list[EventResponse]


# Trial schemas
class TrialsRequest(BaseModel):
    """Request to run a batch of games."""

    player: StrategySpec
    house: StrategySpec
    count: int = Field(..., ge=0, description="Number of games to play")
    seed: int | None = None


class TrialsResponse(BaseModel):
    """Batch result."""

    games: int
    wins: int
    win_rate: float
    outcomes: dict[str, int]


class StrategyListResponse(BaseModel):
    """Available strategy names."""

    strategies: list[str]

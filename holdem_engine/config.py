"""
Table configuration, validated at the engine boundary.
"""

from pydantic import BaseModel, Field, model_validator

from holdem_engine.core.rules import (
    DEFAULT_BIG_BLIND,
    DEFAULT_PLAYER_COUNT,
    DEFAULT_SMALL_BLIND,
    DEFAULT_STARTING_CHIPS,
    MAX_PLAYERS,
    MIN_PLAYERS,
)


class GameConfig(BaseModel):
    """Settings for a table. Invalid values raise pydantic.ValidationError."""
    player_count: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS, default=DEFAULT_PLAYER_COUNT)
    starting_chips: int = Field(gt=0, default=DEFAULT_STARTING_CHIPS)
    small_blind: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(gt=0, default=DEFAULT_BIG_BLIND)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_blinds(self) -> "GameConfig":
        if self.big_blind < self.small_blind:
            raise ValueError("big_blind must be at least small_blind")
        return self

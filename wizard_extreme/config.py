"""Application configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wizard_extreme.constants import DEFAULT_MATCH_ROUNDS


class Settings(BaseSettings):
    """Engine and driver settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIZARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Engine
    seed: Optional[int] = Field(default=None, description="Shuffle seed (None for entropy)")

    # Match
    match_rounds: int = Field(default=DEFAULT_MATCH_ROUNDS, ge=1, description="Rounds per match")

    # Bots
    opponent_bot_type: str = Field(default="rule_based", description="Opponent bot strategy")

    # Gym environment
    agent_seat: int = Field(default=0, ge=0, le=2, description="Seat controlled by the agent")
    max_invalid_moves: int = Field(default=50, ge=1, description="Invalid moves before truncation")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for scripts")


# Global settings instance
settings = Settings()

"""Configuration management for Order Dispatch using Pydantic."""

import logging
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class StrategyName(str, Enum):
    """Names of the built-in selection strategies."""

    LOWEST_COST = "lowest_cost"
    HIGHEST_RATING = "highest_rating"


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dispatch Configuration
    default_strategy: StrategyName = Field(
        default=StrategyName.LOWEST_COST,
        description="Restaurant selection strategy (lowest_cost, highest_rating)",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("default_strategy", mode="before")
    @classmethod
    def validate_default_strategy(cls, v: str) -> StrategyName:
        """Convert a case-insensitive name to StrategyName."""
        if isinstance(v, StrategyName):
            return v
        try:
            return StrategyName(str(v).lower())
        except ValueError:
            valid = [s.value for s in StrategyName]
            raise ValueError(f"Invalid default_strategy. Must be one of: {valid}")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global config
    config = None


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class GameConfig(BaseModel):
    """Game configuration."""

    model_config = ConfigDict(validate_assignment=True)

    rows: int = Field(4, gt=0)
    columns: int = Field(6, gt=0)
    match_size: int = Field(2, gt=0)
    remove_on_match: bool = False  # Hide matched groups after a pause

    @property
    def card_count(self) -> int:
        """Total number of cards on the table."""
        return self.rows * self.columns


class TimingConfig(BaseModel):
    """Pauses used by the front end, in seconds."""

    reset_delay: float = 0.5
    hide_delay: float = 0.5


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game event log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    timing: TimingConfig = TimingConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()

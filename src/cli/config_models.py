"""Pydantic configuration models for serenity-stops."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/serenity/journal")
    log_file: Path = Path("~/serenity/serenity.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class SentimentConfig(BaseModel):
    """Lexicon scorer settings."""

    negation_window: int = Field(default=3, ge=0, le=10)


class StatsConfig(BaseModel):
    """Mood statistics settings."""

    recent_limit: int = Field(default=5, ge=1, le=50)


class MapConfig(BaseModel):
    """Default location used when no coordinate is given."""

    default_latitude: float = 34.0736
    default_longitude: float = -118.4004

    @field_validator("default_latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        if not -90.0 <= v <= 90.0:
            raise ValueError(f"default_latitude must be within [-90, 90], got {v}")
        return v

    @field_validator("default_longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        if not -180.0 <= v <= 180.0:
            raise ValueError(f"default_longitude must be within [-180, 180], got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class SerenityConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "SerenityConfig":
        """Create config from dict, accepting string paths."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["journal_dir", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")

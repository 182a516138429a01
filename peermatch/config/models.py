"""Configuration schema models using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ScoringWeights(BaseModel):
    """Maximum points each scoring term can contribute.

    The five weights must add up to 100 so that a compatibility score is
    always a percentage.
    """

    specialty: float = Field(40, ge=0, description="Topic/specialty overlap")
    session_type: float = Field(20, ge=0, description="Session type coverage")
    availability: float = Field(20, ge=0, description="Day-part availability")
    approach: float = Field(15, ge=0, description="Approach text keywords")
    live_availability: float = Field(5, ge=0, description="Available-now bonus")

    @model_validator(mode="after")
    def validate_total(self):
        """Weights must sum to exactly 100."""
        total = (
            self.specialty
            + self.session_type
            + self.availability
            + self.approach
            + self.live_availability
        )
        if abs(total - 100) > 1e-9:
            raise ValueError(f"Scoring weights must sum to 100, got {total:g}")
        return self

    @property
    def neutral_availability(self) -> float:
        """Credit given when the client named no preferred times."""
        return self.availability / 2

    @property
    def approach_credit(self) -> float:
        """Points for each approach signal (style, personality, detail)."""
        return self.approach / 3


class MatchingConfig(BaseModel):
    """Tunable matching behaviour."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    min_score: int = Field(
        15, ge=0, le=100, description="Score floor for results without a specialty match"
    )
    max_reasons: int = Field(3, ge=1, le=10, description="Reasons kept per result")
    require_onboarding: bool = Field(
        True, description="Directory only returns supporters who finished onboarding"
    )


class DirectoryConfig(BaseModel):
    """Where supporter records are read from."""

    supporters_file: Optional[Path] = Field(
        None, description="JSON or YAML file with supporter rows"
    )
    database_url: Optional[str] = Field(
        None, description="SQLAlchemy URL of the supporter directory database"
    )

    @field_validator("database_url")
    @classmethod
    def strip_database_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for peermatch."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}

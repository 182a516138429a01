"""Input records for supporter matching.

This module defines the two records a matching request is built from:
- ClientPreferences: what the client asked for in the onboarding quiz
- SupporterCandidate: one supporter as read from the directory

Both validate their shape at construction time. Optional data that is
missing or null is replaced by the documented default so the scorer never
has to guard against it.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class SessionType(str, Enum):
    """Ways a session can be held."""

    CHAT = "chat"
    PHONE = "phone"
    VIDEO = "video"


class DayPart(str, Enum):
    """Coarse time-of-day buckets a client can ask for."""

    EARLY_MORNING = "early_morning"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
    WEEKENDS = "weekends"


class CommunicationStyle(str, Enum):
    """How the client prefers to be talked to."""

    DIRECT = "direct"
    EMPATHETIC = "empathetic"
    BALANCED = "balanced"
    EXPLORATORY = "exploratory"


class PersonalityPreference(str, Enum):
    """Supporter personality the client prefers."""

    WARM = "warm"
    MOTIVATING = "motivating"
    CALM = "calm"
    ANALYTICAL = "analytical"


class Urgency(str, Enum):
    """How soon the client wants a session."""

    SOON = "soon"
    WITHIN_WEEK = "within_week"
    FLEXIBLE = "flexible"


ALL_SESSION_TYPES = (SessionType.CHAT, SessionType.PHONE, SessionType.VIDEO)

# supporter_details columns copied onto a candidate by from_directory_row()
DETAIL_FIELDS = (
    "specialties",
    "session_types",
    "availability",
    "approach",
    "is_available",
    "training_complete",
    "accepting_clients",
    "is_verified",
)


def _unique(values: List[Any]) -> List[Any]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def _lowered(values: Any) -> Any:
    if isinstance(values, (list, tuple, set)):
        return [v.strip().lower() if isinstance(v, str) else v for v in values]
    return values


class ClientPreferences(BaseModel):
    """Preferences captured from the client onboarding flow.

    Accepts snake_case or camelCase keys. Keys the form sends that matching
    does not use (mood, goals, timezone, ...) are ignored.
    """

    topics: List[str] = Field(default_factory=list, description="Topic identifiers, in priority order")
    communication_style: Optional[CommunicationStyle] = Field(
        None, description="Preferred communication style"
    )
    preferred_session_types: List[SessionType] = Field(
        default_factory=list, description="Session types the client would book"
    )
    preferred_times: List[DayPart] = Field(
        default_factory=list, description="Day-parts the client is free"
    )
    personality_preference: Optional[PersonalityPreference] = Field(
        None, description="Preferred supporter personality"
    )
    urgency: Urgency = Field(Urgency.FLEXIBLE, description="How soon a session is wanted")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("topics", mode="before")
    @classmethod
    def normalize_topics(cls, v: Any) -> Any:
        """Strip topics, drop blanks and duplicates while keeping order."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        stripped = [t.strip() if isinstance(t, str) else t for t in v]
        return _unique([t for t in stripped if t != ""])

    @field_validator("preferred_session_types", "preferred_times", mode="before")
    @classmethod
    def normalize_choices(cls, v: Any) -> Any:
        """Lowercase choice lists and treat null as empty."""
        if v is None:
            return []
        return _lowered(v)

    @field_validator("preferred_session_types", "preferred_times")
    @classmethod
    def drop_duplicate_choices(cls, v: List[Enum]) -> List[Enum]:
        return _unique(v)

    @field_validator("communication_style", "personality_preference", mode="before")
    @classmethod
    def blank_choice_is_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("urgency", mode="before")
    @classmethod
    def default_urgency(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return Urgency.FLEXIBLE
        if isinstance(v, str):
            return v.strip().lower()
        return v


class SupporterCandidate(BaseModel):
    """A supporter as seen by the matcher.

    Missing optional data falls back to: no specialties, all session types,
    no availability, empty approach. Missing eligibility flags count as
    false, which keeps the supporter out of every result.
    """

    id: str = Field(..., min_length=1, description="Supporter profile id")
    full_name: str = Field("", description="Display name")
    specialties: List[str] = Field(default_factory=list, description="Specialty labels")
    session_types: List[SessionType] = Field(
        default_factory=lambda: list(ALL_SESSION_TYPES),
        description="Session types offered",
    )
    availability: Dict[str, List[str]] = Field(
        default_factory=dict, description="Day label -> 'HH:MM' slots"
    )
    approach: str = Field("", description="Free-text approach description")
    is_available: bool = Field(False, description="Available right now")
    training_complete: bool = False
    accepting_clients: bool = False
    is_verified: bool = False
    onboarding_complete: bool = Field(False, description="Profile-level onboarding flag")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_full_name(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("approach", mode="before")
    @classmethod
    def null_approach_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("specialties", mode="before")
    @classmethod
    def normalize_specialties(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            stripped = [s.strip() if isinstance(s, str) else s for s in v]
            return [s for s in stripped if s != ""]
        return v

    @field_validator("session_types", mode="before")
    @classmethod
    def default_session_types(cls, v: Any) -> Any:
        if v is None:
            return list(ALL_SESSION_TYPES)
        return _lowered(v)

    @field_validator("availability", mode="before")
    @classmethod
    def normalize_availability(cls, v: Any) -> Any:
        """Keep only day entries whose value is a list of slots."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        cleaned = {}
        for day, slots in v.items():
            if isinstance(slots, (list, tuple)):
                cleaned[str(day)] = [str(slot) for slot in slots if slot is not None]
        return cleaned

    @field_validator(
        "is_available",
        "training_complete",
        "accepting_clients",
        "is_verified",
        "onboarding_complete",
        mode="before",
    )
    @classmethod
    def null_flag_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def is_eligible(self) -> bool:
        """Trained, accepting clients and verified."""
        return self.training_complete and self.accepting_clients and self.is_verified

    @classmethod
    def from_directory_row(cls, row: Dict[str, Any]) -> "SupporterCandidate":
        """Build a candidate from a joined profile + supporter_details row.

        ``supporter_details`` may be a dict, a one-element list (the shape a
        one-to-many join returns) or missing. Without details the candidate
        is built with defaults and is therefore ineligible.
        """
        details = row.get("supporter_details")
        if isinstance(details, (list, tuple)):
            details = details[0] if details else None

        data: Dict[str, Any] = {
            "id": row.get("id"),
            "full_name": row.get("full_name"),
            "onboarding_complete": row.get("onboarding_complete"),
        }
        if isinstance(details, dict):
            for key in DETAIL_FIELDS:
                if key in details:
                    data[key] = details[key]

        return cls.model_validate(data)

"""Domain models for matching requests."""

from .models import (
    ALL_SESSION_TYPES,
    ClientPreferences,
    CommunicationStyle,
    DayPart,
    PersonalityPreference,
    SessionType,
    SupporterCandidate,
    Urgency,
)

__all__ = [
    "ALL_SESSION_TYPES",
    "ClientPreferences",
    "CommunicationStyle",
    "DayPart",
    "PersonalityPreference",
    "SessionType",
    "SupporterCandidate",
    "Urgency",
]

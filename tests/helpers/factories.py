"""Builders for matching inputs with sensible test defaults."""

from typing import Any, Dict

from peermatch.domain.models import ClientPreferences, SupporterCandidate


def make_candidate(**overrides: Any) -> SupporterCandidate:
    """Eligible supporter with no specialties, no schedule and no approach text.

    Scores 10 (neutral time credit) + 5 (empty approach) against empty
    preferences, before any overrides.
    """
    data: Dict[str, Any] = {
        "id": "sup-1",
        "full_name": "Test Supporter",
        "specialties": [],
        "session_types": ["chat", "phone", "video"],
        "availability": {},
        "approach": "",
        "is_available": False,
        "training_complete": True,
        "accepting_clients": True,
        "is_verified": True,
        "onboarding_complete": True,
    }
    data.update(overrides)
    return SupporterCandidate.model_validate(data)


def make_preferences(**overrides: Any) -> ClientPreferences:
    """Preferences with every list empty and no style/personality."""
    data: Dict[str, Any] = {
        "topics": [],
        "preferred_session_types": [],
        "preferred_times": [],
        "urgency": "flexible",
    }
    data.update(overrides)
    return ClientPreferences.model_validate(data)


def make_row(supporter_id: str = "sup-1", role: str = "supporter", **details: Any) -> Dict[str, Any]:
    """Joined directory row; ``details=None`` gives a profile without details."""
    row: Dict[str, Any] = {
        "id": supporter_id,
        "full_name": details.pop("full_name", f"Supporter {supporter_id}"),
        "role": role,
        "onboarding_complete": details.pop("onboarding_complete", True),
    }
    if details.pop("no_details", False):
        row["supporter_details"] = None
        return row

    supporter_details = {
        "specialties": ["Anxiety"],
        "approach": "",
        "session_types": ["chat", "phone", "video"],
        "availability": {},
        "is_available": False,
        "training_complete": True,
        "accepting_clients": True,
        "is_verified": True,
    }
    supporter_details.update(details)
    row["supporter_details"] = supporter_details
    return row

"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from peermatch.domain.models import (
    ALL_SESSION_TYPES,
    ClientPreferences,
    CommunicationStyle,
    DayPart,
    PersonalityPreference,
    SessionType,
    SupporterCandidate,
    Urgency,
)
from tests.helpers import make_row


class TestClientPreferences:
    """Tests for ClientPreferences model."""

    def test_defaults(self):
        """Test that an empty payload gives empty preferences."""
        preferences = ClientPreferences()

        assert preferences.topics == []
        assert preferences.communication_style is None
        assert preferences.preferred_session_types == []
        assert preferences.preferred_times == []
        assert preferences.personality_preference is None
        assert preferences.urgency == Urgency.FLEXIBLE

    def test_camel_case_keys(self):
        """Test that the client app's camelCase payload is accepted."""
        preferences = ClientPreferences.model_validate(
            {
                "topics": ["anxiety"],
                "communicationStyle": "direct",
                "preferredSessionTypes": ["chat"],
                "preferredTimes": ["evening"],
                "personalityPreference": "calm",
                "urgency": "soon",
            }
        )

        assert preferences.communication_style == CommunicationStyle.DIRECT
        assert preferences.preferred_session_types == [SessionType.CHAT]
        assert preferences.preferred_times == [DayPart.EVENING]
        assert preferences.personality_preference == PersonalityPreference.CALM
        assert preferences.urgency == Urgency.SOON

    def test_snake_case_keys(self):
        preferences = ClientPreferences(preferred_times=["weekends"], urgency="within_week")

        assert preferences.preferred_times == [DayPart.WEEKENDS]
        assert preferences.urgency == Urgency.WITHIN_WEEK

    def test_topics_stripped_and_deduplicated(self):
        """Test that topics keep their order without blanks or repeats."""
        preferences = ClientPreferences(topics=[" anxiety ", "stress", "", "anxiety", "  "])

        assert preferences.topics == ["anxiety", "stress"]

    def test_choices_are_case_insensitive(self):
        preferences = ClientPreferences(
            preferred_session_types=["Video", "CHAT", "video"],
            communication_style="Empathetic",
        )

        assert preferences.preferred_session_types == [SessionType.VIDEO, SessionType.CHAT]
        assert preferences.communication_style == CommunicationStyle.EMPATHETIC

    def test_null_values_use_defaults(self):
        preferences = ClientPreferences.model_validate(
            {
                "topics": None,
                "preferredSessionTypes": None,
                "preferredTimes": None,
                "communicationStyle": "",
                "urgency": None,
            }
        )

        assert preferences.topics == []
        assert preferences.preferred_session_types == []
        assert preferences.preferred_times == []
        assert preferences.communication_style is None
        assert preferences.urgency == Urgency.FLEXIBLE

    def test_unused_form_fields_ignored(self):
        preferences = ClientPreferences.model_validate(
            {"topics": ["grief"], "mood": 3, "goals": ["sleep better"], "timezone": "UTC"}
        )

        assert preferences.topics == ["grief"]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("preferred_session_types", ["carrier-pigeon"]),
            ("preferred_times", ["brunch"]),
            ("communication_style", "shouty"),
            ("personality_preference", "grumpy"),
            ("urgency", "yesterday"),
        ],
    )
    def test_unknown_choice_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ClientPreferences(**{field: value})

    def test_immutable(self):
        preferences = ClientPreferences(topics=["anxiety"])

        with pytest.raises(ValidationError):
            preferences.topics = ["stress"]


class TestSupporterCandidate:
    """Tests for SupporterCandidate model."""

    def test_defaults(self):
        """Test defaults for missing optional data."""
        candidate = SupporterCandidate(id="sup-1")

        assert candidate.full_name == ""
        assert candidate.specialties == []
        assert candidate.session_types == list(ALL_SESSION_TYPES)
        assert candidate.availability == {}
        assert candidate.approach == ""
        assert candidate.is_available is False
        assert candidate.is_eligible is False

    def test_null_values_use_defaults(self):
        candidate = SupporterCandidate.model_validate(
            {
                "id": "sup-1",
                "full_name": None,
                "specialties": None,
                "session_types": None,
                "availability": None,
                "approach": None,
                "is_available": None,
            }
        )

        assert candidate.full_name == ""
        assert candidate.specialties == []
        assert candidate.session_types == list(ALL_SESSION_TYPES)
        assert candidate.availability == {}
        assert candidate.approach == ""
        assert candidate.is_available is False

    def test_numeric_id_coerced(self):
        assert SupporterCandidate(id=42).id == "42"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_id_required(self, value):
        with pytest.raises(ValidationError):
            SupporterCandidate(id=value)

    def test_full_name_stripped(self):
        assert SupporterCandidate(id="s", full_name="  Alex Rivera ").full_name == "Alex Rivera"

    def test_approach_kept_verbatim(self):
        """Approach length is measured on the stored text."""
        candidate = SupporterCandidate(id="s", approach="  padded  ")

        assert candidate.approach == "  padded  "

    def test_blank_specialties_dropped(self):
        candidate = SupporterCandidate(id="s", specialties=[" Anxiety ", "", "Stress"])

        assert candidate.specialties == ["Anxiety", "Stress"]

    def test_session_types_lowercased(self):
        candidate = SupporterCandidate(id="s", session_types=["Chat", "PHONE"])

        assert candidate.session_types == [SessionType.CHAT, SessionType.PHONE]

    def test_empty_session_types_kept_empty(self):
        assert SupporterCandidate(id="s", session_types=[]).session_types == []

    def test_availability_drops_non_list_entries(self):
        candidate = SupporterCandidate(
            id="s",
            availability={"monday": ["09:00", None], "tuesday": "10:00", "wednesday": None},
        )

        assert candidate.availability == {"monday": ["09:00"]}

    def test_camel_case_keys(self):
        candidate = SupporterCandidate.model_validate(
            {
                "id": "s",
                "fullName": "Sam",
                "sessionTypes": ["video"],
                "isAvailable": True,
                "trainingComplete": True,
                "acceptingClients": True,
                "isVerified": True,
            }
        )

        assert candidate.full_name == "Sam"
        assert candidate.session_types == [SessionType.VIDEO]
        assert candidate.is_available is True
        assert candidate.is_eligible is True

    @pytest.mark.parametrize(
        "flag", ["training_complete", "accepting_clients", "is_verified"]
    )
    def test_eligibility_needs_every_flag(self, flag):
        flags = {"training_complete": True, "accepting_clients": True, "is_verified": True}
        flags[flag] = False

        assert SupporterCandidate(id="s", **flags).is_eligible is False


class TestFromDirectoryRow:
    """Tests for building candidates from joined directory rows."""

    def test_details_as_dict(self):
        row = make_row("sup-7", full_name="Jordan Smith", specialties=["Stress"])

        candidate = SupporterCandidate.from_directory_row(row)

        assert candidate.id == "sup-7"
        assert candidate.full_name == "Jordan Smith"
        assert candidate.specialties == ["Stress"]
        assert candidate.onboarding_complete is True
        assert candidate.is_eligible is True

    def test_details_as_one_element_list(self):
        row = make_row("sup-7")
        row["supporter_details"] = [row["supporter_details"]]

        candidate = SupporterCandidate.from_directory_row(row)

        assert candidate.specialties == ["Anxiety"]
        assert candidate.is_eligible is True

    @pytest.mark.parametrize("details", [None, []])
    def test_missing_details_gives_ineligible_defaults(self, details):
        row = make_row("sup-7", no_details=True)
        row["supporter_details"] = details

        candidate = SupporterCandidate.from_directory_row(row)

        assert candidate.specialties == []
        assert candidate.session_types == list(ALL_SESSION_TYPES)
        assert candidate.is_eligible is False

    def test_null_detail_columns_use_defaults(self):
        row = make_row("sup-7", session_types=None, availability=None, approach=None)

        candidate = SupporterCandidate.from_directory_row(row)

        assert candidate.session_types == list(ALL_SESSION_TYPES)
        assert candidate.availability == {}
        assert candidate.approach == ""

    def test_unrelated_detail_columns_ignored(self):
        row = make_row("sup-7", bio="Hello", total_sessions=12)

        candidate = SupporterCandidate.from_directory_row(row)

        assert not hasattr(candidate, "bio")

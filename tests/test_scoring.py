"""Unit tests for the individual scoring terms.

Each term is tested in isolation:
- Specialty coverage and the topic -> specialty lookup
- Session type coverage
- Slot parsing, weekend detection and day-part availability
- Approach keyword and detail credits
- The available-now bonus
"""

import pytest

from peermatch.domain.models import (
    CommunicationStyle,
    DayPart,
    PersonalityPreference,
    SessionType,
    Urgency,
)
from peermatch.matching.scoring import (
    count_days_in_range,
    has_weekend_availability,
    parse_slot_hour,
    score_approach,
    score_availability,
    score_live_availability,
    score_session_types,
    score_specialties,
)
from peermatch.matching.tables import specialties_for_topic


LONG_NEUTRAL_TEXT = "I meet people where they are and work at whatever pace suits them."


class TestSpecialtiesForTopic:
    """Test the topic -> specialty label lookup."""

    def test_known_topic(self):
        assert specialties_for_topic("identity") == ("LGBTQ+", "Identity", "Coming Out")

    def test_lookup_ignores_case(self):
        assert specialties_for_topic("Work_Career") == ("Work-Life Balance", "Career")

    def test_unknown_topic_matches_itself(self):
        assert specialties_for_topic("Burnout") == ("Burnout",)


class TestScoreSpecialties:
    """Test the specialty term."""

    def test_single_topic_full_match(self):
        result = score_specialties(["anxiety"], ["Anxiety"])

        assert result.points == 40
        assert result.matches == 1
        assert result.reasons == ["Specializes in Anxiety"]

    def test_specialty_comparison_ignores_case(self):
        result = score_specialties(["identity"], ["coming out"])

        assert result.matches == 1
        assert result.reasons == ["Specializes in Coming Out"]

    def test_topic_counts_once_on_first_label(self):
        """A supporter with several labels for one topic gets one reason."""
        result = score_specialties(["identity"], ["Identity", "LGBTQ+", "Coming Out"])

        assert result.matches == 1
        assert result.reasons == ["Specializes in LGBTQ+"]

    def test_partial_coverage_is_proportional(self):
        result = score_specialties(["anxiety", "stress", "depression"], ["Stress"])

        assert result.points == pytest.approx(40 / 3)
        assert result.reasons == ["Specializes in Stress"]

    def test_reasons_follow_topic_order(self):
        result = score_specialties(["grief", "family"], ["Family Issues", "Grief"])

        assert result.points == 40
        assert result.reasons == ["Specializes in Grief", "Specializes in Family Issues"]

    def test_unmapped_topic_compared_verbatim(self):
        result = score_specialties(["Burnout"], ["burnout"])

        assert result.matches == 1
        assert result.reasons == ["Specializes in Burnout"]

    def test_no_topics_scores_zero(self):
        result = score_specialties([], ["Anxiety", "Stress"])

        assert result.points == 0
        assert result.matches == 0
        assert result.reasons == []

    def test_custom_weight(self):
        result = score_specialties(["anxiety", "stress"], ["Anxiety"], weight=50)

        assert result.points == 25


class TestScoreSessionTypes:
    """Test the session type term."""

    def test_all_preferred_offered(self):
        result = score_session_types(
            [SessionType.CHAT, SessionType.PHONE],
            [SessionType.CHAT, SessionType.PHONE, SessionType.VIDEO],
        )

        assert result.points == 20
        assert result.reasons == ["Offers all your preferred session types"]

    def test_partial_coverage_has_no_reason(self):
        result = score_session_types(
            [SessionType.CHAT, SessionType.VIDEO], [SessionType.CHAT, SessionType.PHONE]
        )

        assert result.points == 10
        assert result.matches == 1
        assert result.reasons == []

    def test_no_overlap(self):
        result = score_session_types([SessionType.VIDEO], [SessionType.CHAT])

        assert result.points == 0
        assert result.reasons == []

    def test_no_preference_scores_zero(self):
        result = score_session_types([], [SessionType.CHAT])

        assert result.points == 0
        assert result.reasons == []


class TestParseSlotHour:
    """Test leading-hour parsing of slot strings."""

    @pytest.mark.parametrize(
        "slot,expected",
        [
            ("09:00", 9),
            ("9:00-17:00", 9),
            ("21:30", 21),
            (" 7:15", 7),
            ("14", 14),
            ("noon", None),
            ("", None),
            (":30", None),
        ],
    )
    def test_parse(self, slot, expected):
        assert parse_slot_hour(slot) == expected


class TestWeekendAvailability:
    """Test weekend detection by day name."""

    def test_saturday_with_slots(self):
        assert has_weekend_availability({"saturday": ["10:00"]}) is True

    def test_day_name_case_ignored(self):
        assert has_weekend_availability({"SUNDAY": ["08:00"]}) is True

    def test_empty_weekend_day_does_not_count(self):
        assert has_weekend_availability({"sunday": [], "monday": ["09:00"]}) is False

    def test_no_weekend_days(self):
        assert has_weekend_availability({"friday": ["18:00"]}) is False


class TestCountDaysInRange:
    """Test per-day counting of slots inside an hour range."""

    def test_counts_each_day_once(self):
        availability = {
            "monday": ["09:00", "10:00", "11:00"],
            "tuesday": ["10:30"],
            "wednesday": ["14:00"],
        }

        assert count_days_in_range(availability, 9, 12) == 2

    def test_range_end_is_exclusive(self):
        assert count_days_in_range({"monday": ["21:00"]}, 17, 21) == 0
        assert count_days_in_range({"monday": ["17:00"]}, 17, 21) == 1

    def test_unparseable_slots_are_skipped(self):
        assert count_days_in_range({"monday": ["noon", "morning"]}, 9, 12) == 0


class TestScoreAvailability:
    """Test the availability term."""

    def test_no_preferred_times_gets_half_credit(self):
        """Flexible clients get half the weight even from an empty schedule.

        The specialty and session-type terms give 0 for an empty preference;
        this term intentionally does not.
        """
        result = score_availability([], {})

        assert result.points == 10
        assert result.reasons == []

    def test_no_preferred_times_with_custom_weight(self):
        assert score_availability([], {"monday": ["09:00"]}, weight=30).points == 15

    def test_single_day_part_matched(self):
        result = score_availability([DayPart.MORNING], {"monday": ["09:00"]})

        assert result.points == 20
        assert result.reasons == ["Available when you need"]

    def test_half_of_day_parts_matched(self):
        result = score_availability(
            [DayPart.MORNING, DayPart.EVENING], {"monday": ["09:00"]}
        )

        assert result.points == 10
        assert result.reasons == []

    def test_extra_days_make_up_for_missed_day_part(self):
        """Two open mornings cover a request for morning and evening."""
        result = score_availability(
            [DayPart.MORNING, DayPart.EVENING],
            {"monday": ["09:00"], "tuesday": ["10:30"]},
        )

        assert result.matches == 2
        assert result.points == 20

    def test_points_are_capped_at_weight(self):
        availability = {day: ["09:00"] for day in ("monday", "tuesday", "wednesday")}

        result = score_availability([DayPart.MORNING], availability)

        assert result.matches == 3
        assert result.points == 20

    def test_reason_at_three_quarters(self):
        """Three matches over four day-parts is exactly 75% of the weight."""
        availability = {day: ["10:00"] for day in ("monday", "tuesday", "wednesday")}

        result = score_availability(
            [DayPart.MORNING, DayPart.AFTERNOON, DayPart.EVENING, DayPart.NIGHT],
            availability,
        )

        assert result.points == 15
        assert result.reasons == ["Available when you need"]

    def test_weekends_count_once(self):
        result = score_availability(
            [DayPart.WEEKENDS, DayPart.NIGHT],
            {"saturday": ["22:00"], "sunday": ["10:00"]},
        )

        # weekends: 1, night: saturday only
        assert result.matches == 2
        assert result.points == 20

    def test_weekend_key_without_slots(self):
        result = score_availability([DayPart.WEEKENDS], {"saturday": []})

        assert result.points == 0

    def test_early_morning_range(self):
        result = score_availability(
            [DayPart.EARLY_MORNING], {"tuesday": ["07:00"], "thursday": ["09:00"]}
        )

        assert result.matches == 1
        assert result.points == 20

    def test_empty_schedule(self):
        result = score_availability([DayPart.MORNING, DayPart.AFTERNOON], {})

        assert result.points == 0
        assert result.reasons == []


class TestScoreApproach:
    """Test the approach term."""

    def test_empty_approach_gets_one_credit(self):
        result = score_approach(
            CommunicationStyle.EMPATHETIC, PersonalityPreference.WARM, ""
        )

        assert result.points == 5
        assert result.reasons == []

    def test_style_keyword_only(self):
        result = score_approach(CommunicationStyle.EMPATHETIC, None, "I listen.")

        assert result.points == 5
        assert result.reasons == []

    def test_keywords_match_case_insensitively(self):
        result = score_approach(CommunicationStyle.EMPATHETIC, None, "EMPATHY first")

        assert result.points == 5

    def test_style_and_personality_earn_reason(self):
        result = score_approach(
            CommunicationStyle.DIRECT, PersonalityPreference.CALM, "Practical and calm."
        )

        assert result.points == 10
        assert result.reasons == ["Communication style match"]

    def test_all_three_credits(self):
        approach = "I listen closely and offer a warm, steady presence through hard weeks."

        result = score_approach(
            CommunicationStyle.EMPATHETIC, PersonalityPreference.WARM, approach
        )

        assert result.points == 15
        assert result.reasons == ["Communication style match"]

    def test_detail_credit_only(self):
        result = score_approach(None, None, LONG_NEUTRAL_TEXT)

        assert result.points == 5
        assert result.reasons == []

    def test_detail_credit_needs_more_than_fifty_characters(self):
        assert score_approach(None, None, "a" * 50).points == 0
        assert score_approach(None, None, "a" * 51).points == 5

    def test_no_keyword_hit_without_preferences(self):
        result = score_approach(None, None, "Calm and warm.")

        assert result.points == 0

    def test_custom_weight_splits_into_thirds(self):
        result = score_approach(
            CommunicationStyle.DIRECT, None, "Goal-oriented sessions.", weight=30
        )

        assert result.points == 10


class TestScoreLiveAvailability:
    """Test the available-now bonus."""

    def test_available_and_urgent(self):
        result = score_live_availability(True, Urgency.SOON)

        assert result.points == 5
        assert result.reasons == ["Available now"]

    @pytest.mark.parametrize("urgency", [Urgency.WITHIN_WEEK, Urgency.FLEXIBLE])
    def test_available_without_urgency_has_no_reason(self, urgency):
        result = score_live_availability(True, urgency)

        assert result.points == 5
        assert result.reasons == []

    def test_not_available(self):
        result = score_live_availability(False, Urgency.SOON)

        assert result.points == 0
        assert result.reasons == []

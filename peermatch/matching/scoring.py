"""Sub-score functions for supporter matching.

Each function scores one aspect of a supporter against the client's
preferences and reports the reasons it found, in discovery order. The
functions are pure; the engine sums them in this order:

1. specialties        (topics the supporter specializes in)
2. session types      (chat / phone / video coverage)
3. availability       (day-parts with open slots)
4. approach           (style and personality keywords in the approach text)
5. live availability  (available-now bonus)
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence

from peermatch.domain.models import (
    CommunicationStyle,
    DayPart,
    PersonalityPreference,
    SessionType,
    Urgency,
)

from .tables import (
    DAY_PART_HOURS,
    DETAILED_APPROACH_LENGTH,
    PERSONALITY_KEYWORDS,
    REASON_APPROACH,
    REASON_AVAILABILITY,
    REASON_AVAILABLE_NOW,
    REASON_SESSION_TYPES,
    REASON_SPECIALTY,
    STYLE_KEYWORDS,
    WEEKEND_DAYS,
    specialties_for_topic,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class SubScore:
    """Points earned by one scoring term.

    Attributes:
        points: Points awarded (0 up to the term's weight)
        reasons: Human-readable reasons, in discovery order
        matches: Number of matched items (topics, session types, day-parts)
    """

    points: float = 0.0
    reasons: List[str] = field(default_factory=list)
    matches: int = 0


def score_specialties(
    topics: Sequence[str], specialties: Iterable[str], weight: float = 40
) -> SubScore:
    """Score topic coverage by the supporter's specialties.

    A topic counts once, on the first of its specialty labels the supporter
    has. No topics means no points.
    """
    offered = {s.lower() for s in specialties}
    result = SubScore()

    for topic in topics:
        for specialty in specialties_for_topic(topic):
            if specialty.lower() in offered:
                result.matches += 1
                result.reasons.append(REASON_SPECIALTY.format(specialty=specialty))
                break

    if topics:
        result.points = (result.matches / len(topics)) * weight
    return result


def score_session_types(
    preferred: Sequence[SessionType], offered: Iterable[SessionType], weight: float = 20
) -> SubScore:
    """Score how many of the preferred session types the supporter offers."""
    offered_set = set(offered)
    result = SubScore()
    if not preferred:
        return result

    result.matches = sum(1 for session_type in preferred if session_type in offered_set)
    result.points = (result.matches / len(preferred)) * weight
    if result.matches == len(preferred):
        result.reasons.append(REASON_SESSION_TYPES)
    return result


def parse_slot_hour(slot: str) -> Optional[int]:
    """Leading hour of a slot string ("09:00" -> 9, "9:00-17:00" -> 9).

    Returns None when the part before the first colon has no leading integer.
    """
    match = _LEADING_INT.match(slot.split(":", 1)[0])
    if match is None:
        return None
    return int(match.group(1))


def has_weekend_availability(availability: Mapping[str, Sequence[str]]) -> bool:
    """True when Saturday or Sunday has at least one slot."""
    return any(
        day.strip().lower() in WEEKEND_DAYS and len(slots) > 0
        for day, slots in availability.items()
    )


def count_days_in_range(availability: Mapping[str, Sequence[str]], start: int, end: int) -> int:
    """Number of days with at least one slot starting in [start, end)."""
    days = 0
    for slots in availability.values():
        for slot in slots:
            hour = parse_slot_hour(slot)
            if hour is not None and start <= hour < end:
                days += 1
                break
    return days


def score_availability(
    preferred_times: Sequence[DayPart],
    availability: Mapping[str, Sequence[str]],
    weight: float = 20,
) -> SubScore:
    """Score the supporter's schedule against the client's day-parts.

    Weekends count once. Every other day-part counts once per day that has a
    slot in its hour range, so a supporter open several mornings can make up
    for a missed day-part; the total is capped at the weight.

    With no preferred times the client is treated as flexible and gets half
    the weight. The specialty and session-type terms give 0 in the same
    situation; the difference is deliberate.
    """
    result = SubScore()
    if not preferred_times:
        result.points = weight / 2
    else:
        for day_part in preferred_times:
            if day_part == DayPart.WEEKENDS:
                if has_weekend_availability(availability):
                    result.matches += 1
                continue

            hours = DAY_PART_HOURS.get(day_part)
            if hours is None:
                continue
            result.matches += count_days_in_range(availability, *hours)

        result.points = min(weight, (result.matches / len(preferred_times)) * weight)

    if result.points >= weight * 0.75:
        result.reasons.append(REASON_AVAILABILITY)
    return result


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def score_approach(
    communication_style: Optional[CommunicationStyle],
    personality_preference: Optional[PersonalityPreference],
    approach: str,
    weight: float = 15,
) -> SubScore:
    """Score the supporter's approach description.

    The weight is split into three equal credits: a style keyword, a
    personality keyword and a detailed (over 50 characters) description. An
    empty description earns one credit.
    """
    credit = weight / 3
    result = SubScore()

    if not approach:
        result.points = credit
        return result

    text = approach.lower()
    points = 0.0
    if communication_style is not None and _contains_any(
        text, STYLE_KEYWORDS.get(communication_style, ())
    ):
        points += credit
    if personality_preference is not None and _contains_any(
        text, PERSONALITY_KEYWORDS.get(personality_preference, ())
    ):
        points += credit
    if len(approach) > DETAILED_APPROACH_LENGTH:
        points += credit

    result.points = min(weight, points)
    # two of the three credits
    if result.points * 3 >= weight * 2:
        result.reasons.append(REASON_APPROACH)
    return result


def score_live_availability(is_available: bool, urgency: Urgency, weight: float = 5) -> SubScore:
    """Bonus for supporters who are available right now."""
    result = SubScore()
    if is_available:
        result.points = weight
        if urgency == Urgency.SOON:
            result.reasons.append(REASON_AVAILABLE_NOW)
    return result

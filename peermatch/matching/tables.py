"""Static lookup tables used by the scorer."""

from types import MappingProxyType
from typing import Mapping, Tuple

from peermatch.domain.models import CommunicationStyle, DayPart, PersonalityPreference

# Quiz topic id -> specialty labels used in supporter profiles.
# Topics missing here are compared against specialties verbatim.
TOPIC_SPECIALTIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "anxiety": ("Anxiety",),
        "stress": ("Stress",),
        "depression": ("Depression",),
        "relationships": ("Relationships",),
        "loneliness": ("Loneliness",),
        "work_career": ("Work-Life Balance", "Career"),
        "academic": ("Academic Pressure",),
        "self_esteem": ("Self-Esteem",),
        "family": ("Family Issues", "Family"),
        "grief": ("Grief/Loss", "Grief"),
        "transitions": ("Life Transitions", "Transitions"),
        "identity": ("LGBTQ+", "Identity", "Coming Out"),
    }
)

# Day-part -> [start, end) hour range. Weekends are matched by day name instead.
DAY_PART_HOURS: Mapping[DayPart, Tuple[int, int]] = MappingProxyType(
    {
        DayPart.EARLY_MORNING: (6, 9),
        DayPart.MORNING: (9, 12),
        DayPart.AFTERNOON: (12, 17),
        DayPart.EVENING: (17, 21),
        DayPart.NIGHT: (21, 24),
    }
)

WEEKEND_DAYS = frozenset({"saturday", "sunday"})

# Keyword stems searched (case-insensitive substring) in the approach text
STYLE_KEYWORDS: Mapping[CommunicationStyle, Tuple[str, ...]] = MappingProxyType(
    {
        CommunicationStyle.DIRECT: ("practical", "actionable", "direct", "solution", "goal"),
        CommunicationStyle.EMPATHETIC: (
            "empathy", "listen", "understand", "support", "validate", "safe",
        ),
        CommunicationStyle.BALANCED: ("balance", "both", "combine", "flexible", "adapt"),
        CommunicationStyle.EXPLORATORY: (
            "explore", "reflect", "question", "understand", "insight", "discover",
        ),
    }
)

PERSONALITY_KEYWORDS: Mapping[PersonalityPreference, Tuple[str, ...]] = MappingProxyType(
    {
        PersonalityPreference.WARM: (
            "warm", "caring", "nurturing", "gentle", "compassion", "comfort",
        ),
        PersonalityPreference.MOTIVATING: (
            "motivat", "energy", "uplift", "encourage", "action", "positive",
        ),
        PersonalityPreference.CALM: ("calm", "peace", "steady", "ground", "reassur", "relax"),
        PersonalityPreference.ANALYTICAL: (
            "analytic", "logic", "thought", "method", "insight", "understand",
        ),
    }
)

# Approach text longer than this earns the "detailed description" credit
DETAILED_APPROACH_LENGTH = 50

REASON_SPECIALTY = "Specializes in {specialty}"
REASON_SESSION_TYPES = "Offers all your preferred session types"
REASON_AVAILABILITY = "Available when you need"
REASON_APPROACH = "Communication style match"
REASON_AVAILABLE_NOW = "Available now"


def specialties_for_topic(topic: str) -> Tuple[str, ...]:
    """Specialty labels a topic is satisfied by."""
    return TOPIC_SPECIALTIES.get(topic.lower(), (topic,))

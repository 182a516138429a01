"""Data models for matching results."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive scores."""
    # tolerance absorbs float noise such as 12.4999999 from 40 * (5 / 16)
    return int(math.floor(value + 0.5 + 1e-9))


@dataclass
class ScoreBreakdown:
    """Points per scoring term for one supporter.

    Attributes:
        specialty: Topic/specialty term
        session_type: Session type coverage term
        availability: Day-part availability term
        approach: Approach text term
        live_availability: Available-now bonus
        specialty_matches: Number of topics the supporter specializes in
        reasons: Every reason found, in discovery order (not truncated)
    """

    specialty: float = 0.0
    session_type: float = 0.0
    availability: float = 0.0
    approach: float = 0.0
    live_availability: float = 0.0
    specialty_matches: int = 0
    reasons: List[str] = field(default_factory=list)

    @property
    def total(self) -> float:
        """Unrounded sum of all terms."""
        return (
            self.specialty
            + self.session_type
            + self.availability
            + self.approach
            + self.live_availability
        )

    @property
    def compatibility_score(self) -> int:
        return round_half_up(self.total)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "specialty": round(self.specialty, 2),
            "sessionType": round(self.session_type, 2),
            "availability": round(self.availability, 2),
            "approach": round(self.approach, 2),
            "liveAvailability": round(self.live_availability, 2),
            "specialtyMatches": self.specialty_matches,
        }


@dataclass
class MatchResult:
    """A supporter that made it into the ranked result list.

    Attributes:
        supporter_id: Supporter profile id
        full_name: Display name
        specialties: Specialty labels, echoed from the candidate
        compatibility_score: Integer score from 0 to 100
        match_reasons: Up to max_reasons reasons, in discovery order
        breakdown: Per-term points behind the score
    """

    supporter_id: str
    full_name: str
    specialties: List[str]
    compatibility_score: int
    match_reasons: List[str] = field(default_factory=list)
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape the client app consumes."""
        return {
            "supporterId": self.supporter_id,
            "fullName": self.full_name,
            "specialties": list(self.specialties),
            "compatibilityScore": self.compatibility_score,
            "matchReasons": list(self.match_reasons),
        }

"""Supporter matching engine.

This module implements the matching logic that:
1. Drops supporters who are not trained, accepting clients and verified
2. Scores every remaining supporter with the five sub-scores
3. Keeps supporters above the score floor or with any specialty match
4. Ranks them by score, keeping input order for ties
"""

import logging
from typing import Iterable, List, Optional

from peermatch.config.models import MatchingConfig
from peermatch.domain.models import ClientPreferences, SupporterCandidate

from .models import MatchResult, ScoreBreakdown
from .scoring import (
    score_approach,
    score_availability,
    score_live_availability,
    score_session_types,
    score_specialties,
)

logger = logging.getLogger(__name__)


class SupporterMatcher:
    """Scores and ranks supporters for one client.

    Holds no per-request state: the same instance can serve concurrent
    requests, and identical inputs always give identical output.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SupporterMatcher.

        Args:
            config: Weights and thresholds (defaults to MatchingConfig())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.config = config or MatchingConfig()
        self.logger = logger_instance or logger

    @staticmethod
    def is_eligible(candidate: SupporterCandidate) -> bool:
        """Trained, accepting clients and verified. No partial credit."""
        return candidate.is_eligible

    def evaluate(
        self, candidate: SupporterCandidate, preferences: ClientPreferences
    ) -> ScoreBreakdown:
        """Score one supporter without applying eligibility or inclusion rules."""
        weights = self.config.weights

        specialty = score_specialties(
            preferences.topics, candidate.specialties, weights.specialty
        )
        session = score_session_types(
            preferences.preferred_session_types, candidate.session_types, weights.session_type
        )
        availability = score_availability(
            preferences.preferred_times, candidate.availability, weights.availability
        )
        approach = score_approach(
            preferences.communication_style,
            preferences.personality_preference,
            candidate.approach,
            weights.approach,
        )
        live = score_live_availability(
            candidate.is_available, preferences.urgency, weights.live_availability
        )

        reasons: List[str] = []
        for sub_score in (specialty, session, availability, approach, live):
            reasons.extend(sub_score.reasons)

        return ScoreBreakdown(
            specialty=specialty.points,
            session_type=session.points,
            availability=availability.points,
            approach=approach.points,
            live_availability=live.points,
            specialty_matches=specialty.matches,
            reasons=reasons,
        )

    def is_included(self, breakdown: ScoreBreakdown) -> bool:
        """Any specialty match bypasses the score floor."""
        return (
            breakdown.compatibility_score >= self.config.min_score
            or breakdown.specialty_matches > 0
        )

    def match(
        self, candidates: Iterable[SupporterCandidate], preferences: ClientPreferences
    ) -> List[MatchResult]:
        """Rank supporters for a client.

        Args:
            candidates: Supporters to consider, in directory order
            preferences: The client's preferences

        Returns:
            Included supporters, best score first; ties keep input order
        """
        results: List[MatchResult] = []
        considered = 0
        ineligible = 0

        for candidate in candidates:
            considered += 1

            if not self.is_eligible(candidate):
                ineligible += 1
                self.logger.debug(
                    f"Supporter not eligible: {candidate.id}",
                    extra={
                        "event": "matching.candidate.ineligible",
                        "supporter_id": candidate.id,
                        "training_complete": candidate.training_complete,
                        "accepting_clients": candidate.accepting_clients,
                        "is_verified": candidate.is_verified,
                    },
                )
                continue

            breakdown = self.evaluate(candidate, preferences)

            if not self.is_included(breakdown):
                self.logger.debug(
                    f"Supporter below threshold: {candidate.id}",
                    extra={
                        "event": "matching.candidate.below_threshold",
                        "supporter_id": candidate.id,
                        "score": breakdown.compatibility_score,
                        "min_score": self.config.min_score,
                    },
                )
                continue

            results.append(
                MatchResult(
                    supporter_id=candidate.id,
                    full_name=candidate.full_name,
                    specialties=list(candidate.specialties),
                    compatibility_score=breakdown.compatibility_score,
                    match_reasons=breakdown.reasons[: self.config.max_reasons],
                    breakdown=breakdown,
                )
            )

        # sorted() is stable, so equal scores stay in input order
        ranked = sorted(results, key=lambda r: r.compatibility_score, reverse=True)

        self.logger.info(
            f"Matched {len(ranked)} of {considered} supporters",
            extra={
                "event": "matching.completed",
                "candidates_considered": considered,
                "candidates_ineligible": ineligible,
                "matches_returned": len(ranked),
                "top_score": ranked[0].compatibility_score if ranked else None,
            },
        )
        return ranked

    def best_match(
        self, candidates: Iterable[SupporterCandidate], preferences: ClientPreferences
    ) -> Optional[MatchResult]:
        """Top-ranked supporter, or None when nobody qualifies."""
        ranked = self.match(candidates, preferences)
        return ranked[0] if ranked else None


def match_supporters(
    candidates: Iterable[SupporterCandidate],
    preferences: ClientPreferences,
    config: Optional[MatchingConfig] = None,
) -> List[MatchResult]:
    """Rank supporters for a client with the given (or default) configuration."""
    return SupporterMatcher(config).match(candidates, preferences)

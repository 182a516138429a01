"""Supporter matching: scoring, filtering and ranking.

This module provides:
- SupporterMatcher / match_supporters: rank supporters for a client
- MatchResult, ScoreBreakdown: result models
- Sub-score functions for scoring individual aspects
- Payload helpers for downstream consumers
"""

from .engine import SupporterMatcher, match_supporters
from .models import MatchResult, ScoreBreakdown, round_half_up
from .scoring import (
    SubScore,
    parse_slot_hour,
    score_approach,
    score_availability,
    score_live_availability,
    score_session_types,
    score_specialties,
)
from .utils import build_match_payload, build_rationale_dict

__all__ = [
    "SupporterMatcher",
    "match_supporters",
    "MatchResult",
    "ScoreBreakdown",
    "SubScore",
    "round_half_up",
    "parse_slot_hour",
    "score_specialties",
    "score_session_types",
    "score_availability",
    "score_approach",
    "score_live_availability",
    "build_match_payload",
    "build_rationale_dict",
]

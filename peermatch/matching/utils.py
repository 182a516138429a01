"""Helpers for handing match results to downstream consumers."""

from typing import Any, Dict, List, Sequence

from .models import MatchResult


def build_match_payload(results: Sequence[MatchResult]) -> List[Dict[str, Any]]:
    """Serialize ranked results for the client app (camelCase keys, rank order)."""
    return [result.to_dict() for result in results]


def build_rationale_dict(result: MatchResult) -> Dict[str, Any]:
    """Score breakdown for logs and diagnostics.

    Includes every reason found, not only the ones shown to the client.
    """
    return {
        "supporterId": result.supporter_id,
        "compatibilityScore": result.compatibility_score,
        "breakdown": result.breakdown.to_dict(),
        "allReasons": list(result.breakdown.reasons),
        "shownReasons": list(result.match_reasons),
    }

"""Plain-text match reports rendered with Jinja2.

Templates live in the peermatch.reporting.templates package directory and
are rendered with strict undefined checking so a template typo fails loudly
instead of printing blanks.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from peermatch.domain.models import ClientPreferences
from peermatch.matching.models import MatchResult
from peermatch.matching.utils import build_match_payload

logger = logging.getLogger(__name__)


class ReportRenderError(Exception):
    """Raised when a report template fails to render."""

    pass


def _preferences_context(preferences: Optional[ClientPreferences]) -> Optional[Dict[str, Any]]:
    if preferences is None:
        return None
    return {
        "topics": list(preferences.topics),
        "communication_style": (
            preferences.communication_style.value if preferences.communication_style else None
        ),
        "session_types": [t.value for t in preferences.preferred_session_types],
        "times": [t.value for t in preferences.preferred_times],
        "personality": (
            preferences.personality_preference.value
            if preferences.personality_preference
            else None
        ),
        "urgency": preferences.urgency.value,
    }


class ReportRenderer:
    """Renders ranked matches as a plain-text report."""

    def __init__(
        self,
        template_dir: str = "templates",
        report_template: str = "match_report.txt.j2",
    ):
        """Initialize renderer.

        Args:
            template_dir: Directory name within the peermatch.reporting package
            report_template: Filename of the report template
        """
        self.report_template_name = report_template
        self.env = Environment(
            loader=PackageLoader("peermatch.reporting", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self,
        results: Sequence[MatchResult],
        preferences: Optional[ClientPreferences] = None,
    ) -> str:
        """Render a report for ranked results.

        Args:
            results: Ranked match results (rendered in the given order)
            preferences: Client preferences to summarize in the header

        Returns:
            Report text

        Raises:
            ReportRenderError: If template loading or rendering fails
        """
        context = {
            "matches": build_match_payload(results),
            "preferences": _preferences_context(preferences),
        }
        try:
            template = self.env.get_template(self.report_template_name)
            return template.render(context)
        except TemplateError as e:
            error_msg = f"Report rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise ReportRenderError(error_msg) from e

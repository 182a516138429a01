"""Human-readable reports of match results."""

from .renderer import ReportRenderError, ReportRenderer

__all__ = ["ReportRenderer", "ReportRenderError"]

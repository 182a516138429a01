"""Configuration errors."""

from typing import List, Optional, Sequence


def _section(title: str, lines: Sequence[str]) -> List[str]:
    if not lines:
        return []
    return ["", f"{title}:", *lines]


class ConfigurationError(Exception):
    """
    Configuration (file or environment) could not be used.

    ``errors`` holds one line per problem and ``suggestions`` hints at a
    fix; both are rendered below the message so the CLI can print the
    exception as-is.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        super().__init__(self.render())

    def render(self) -> str:
        numbered = [f"  {n}. {line}" for n, line in enumerate(self.errors, start=1)]
        hints = [f"  - {hint}" for hint in self.suggestions]
        lines = [self.message]
        lines += _section("Validation Errors", numbered)
        lines += _section("Suggestions", hints)
        return "\n".join(lines)

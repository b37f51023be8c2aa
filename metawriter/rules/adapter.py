"""
Rules adapter for the meta tags component.
"""

from __future__ import annotations

from metawriter.components.meta_tags import FormattingConfig
from metawriter.rules.models import Rules


class RulesAdapter:
    """Exposes loaded rules through the meta tags RulesPort."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_formatting_config(self) -> FormattingConfig:
        """Build a new FormattingConfig; callers own the returned object."""
        fmt = self._rules.formatting
        return FormattingConfig(
            use_new_line_between_entries=fmt.use_new_line_between_entries,
            newline_policy=fmt.newline_policy,
            omit_empty_values=fmt.omit_empty_values,
        )

    def get_tag_defaults(self) -> dict[str, str | None]:
        """Get record defaults as a plain dict."""
        return self._rules.defaults.model_dump()

"""
Meta tags component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from ._impl import FormattingConfig


class RulesPort(Protocol):
    """Port for accessing formatting rules configuration."""

    def get_formatting_config(self) -> FormattingConfig:
        """Get a fresh formatting config built from the rules."""
        ...

    def get_tag_defaults(self) -> dict[str, str | None]:
        """Get record defaults keyed by charset, viewport, og_type, twitter_card."""
        ...

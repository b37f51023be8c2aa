"""
Formatting rules - YAML-driven defaults for the meta tag writers.
"""

from .adapter import RulesAdapter
from .loader import load_rules
from .models import FormattingRules, Rules, TagDefaults

__all__ = [
    "FormattingRules",
    "Rules",
    "RulesAdapter",
    "TagDefaults",
    "load_rules",
]

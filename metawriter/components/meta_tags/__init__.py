"""
Meta tags component - HTML <head> tag writers.
"""

from ._impl import (
    NEWLINE_POLICIES,
    CommonMetaTags,
    Config,
    FormattingConfig,
    MetaTag,
    OpenGraphMetaTags,
    PageMetaTags,
    SEOMetaTags,
    TwitterMetaTags,
    WriteOptions,
    is_present,
)
from .component import run, run_write_all
from .models import MetaTagsOutput, RenderMetaTagsInput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_write_all",
    # Input models
    "RenderMetaTagsInput",
    # Output models
    "MetaTagsOutput",
    # Ports
    "RulesPort",
    # Writers
    "CommonMetaTags",
    "OpenGraphMetaTags",
    "PageMetaTags",
    "SEOMetaTags",
    "TwitterMetaTags",
    "WriteOptions",
    # Formatting
    "NEWLINE_POLICIES",
    "Config",
    "FormattingConfig",
    "MetaTag",
    "is_present",
]

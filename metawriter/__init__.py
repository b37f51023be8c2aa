"""
metawriter - HTML <head> meta tag writers for SSR pages.

Use the individual writers (PageMetaTags, SEOMetaTags, OpenGraphMetaTags,
TwitterMetaTags) or CommonMetaTags to manage all four together. The
process-wide formatting default is Config; mutate its attributes rather than
rebinding the name.
"""

from metawriter.components.meta_tags import (
    CommonMetaTags,
    Config,
    FormattingConfig,
    MetaTagsOutput,
    OpenGraphMetaTags,
    PageMetaTags,
    RenderMetaTagsInput,
    SEOMetaTags,
    TwitterMetaTags,
    WriteOptions,
    run,
    run_write_all,
)
from metawriter.rules import Rules, RulesAdapter, load_rules

__all__ = [
    "CommonMetaTags",
    "Config",
    "FormattingConfig",
    "MetaTagsOutput",
    "OpenGraphMetaTags",
    "PageMetaTags",
    "RenderMetaTagsInput",
    "Rules",
    "RulesAdapter",
    "SEOMetaTags",
    "TwitterMetaTags",
    "WriteOptions",
    "load_rules",
    "run",
    "run_write_all",
]

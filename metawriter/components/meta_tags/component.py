"""
Meta tags component - combined <head> tag builder.

Builds a CommonMetaTags from a flat input record and renders it.

Invariants:
- I1: Absent (None) fields emit no tag
- I2: Block order is page, SEO, Open Graph, Twitter
- I3: Output is a pure function of input + rules
- I4: Values are not escaped
"""

from __future__ import annotations

import logging

from ._impl import CommonMetaTags, WriteOptions
from .models import MetaTagsOutput, RenderMetaTagsInput
from .ports import RulesPort

logger = logging.getLogger(__name__)


def _apply_defaults(tags: CommonMetaTags, defaults: dict[str, str | None]) -> None:
    """Apply rules defaults to freshly built records."""
    if "charset" in defaults:
        tags.page.charset = defaults["charset"]
    if "viewport" in defaults:
        tags.page.viewport = defaults["viewport"]
    if "og_type" in defaults:
        tags.og.type = defaults["og_type"]
    if "twitter_card" in defaults:
        tags.twitter.card = defaults["twitter_card"]


def _create_tags(rules: RulesPort | None) -> CommonMetaTags:
    """Create the aggregator from the rules port."""
    if rules is None:
        return CommonMetaTags()

    tags = CommonMetaTags(config=rules.get_formatting_config())
    defaults = rules.get_tag_defaults()
    _apply_defaults(tags, defaults)
    logger.debug("Applied tag defaults from rules: %s", sorted(defaults))
    return tags


# --- Component Entry Points ---


def run_write_all(
    inp: RenderMetaTagsInput,
    *,
    rules: RulesPort | None = None,
) -> MetaTagsOutput:
    """
    Build and render the combined page, SEO, Open Graph and Twitter tags.

    Args:
        inp: Input containing the shared and per-record field values.
        rules: Optional rules port for formatting config and defaults.

    Returns:
        MetaTagsOutput with the rendered HTML and the populated writer.
    """
    tags = _create_tags(rules)

    if inp.title is not None:
        tags.set_title_for_all(inp.title)
    if inp.description is not None:
        tags.set_description_for_all(inp.description)
    if inp.image is not None:
        tags.set_image_for_all(inp.image)

    overrides = (
        (tags.seo, "canonical", inp.canonical),
        (tags.seo, "keywords", inp.keywords),
        (tags.seo, "robots", inp.robots),
        (tags.seo, "googlebot", inp.googlebot),
        (tags.seo, "bingbot", inp.bingbot),
        (tags.page, "theme_color", inp.theme_color),
        (tags.og, "url", inp.og_url),
        (tags.og, "type", inp.og_type),
        (tags.og, "site_name", inp.og_site_name),
        (tags.twitter, "card", inp.twitter_card),
        (tags.twitter, "site", inp.twitter_site),
        (tags.twitter, "creator", inp.twitter_creator),
    )
    for record, name, value in overrides:
        if value is not None:
            setattr(record, name, value)

    html = tags.write(WriteOptions(new_line=inp.new_line))
    logger.debug("Rendered %d characters of meta tags", len(html))

    return MetaTagsOutput(html=html, tags=tags, success=True)


def run(
    inp: RenderMetaTagsInput,
    *,
    rules: RulesPort | None = None,
) -> MetaTagsOutput:
    """
    Main entry point for the meta tags component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for formatting configuration.

    Returns:
        MetaTagsOutput with the rendered tags.
    """
    if isinstance(inp, RenderMetaTagsInput):
        return run_write_all(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

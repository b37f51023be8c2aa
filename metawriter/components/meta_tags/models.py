"""
Meta tags component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._impl import CommonMetaTags

# --- Input Models ---


@dataclass(frozen=True)
class RenderMetaTagsInput:
    """
    Input for rendering the combined <head> tags.

    title, description and image fan out to every record with a matching
    field. Any field left as None keeps the record's default.
    """

    title: str | None = None
    description: str | None = None
    image: str | None = None
    canonical: str | None = None
    keywords: str | None = None
    robots: str | None = None
    googlebot: str | None = None
    bingbot: str | None = None
    theme_color: str | None = None
    og_url: str | None = None
    og_type: str | None = None
    og_site_name: str | None = None
    twitter_card: str | None = None
    twitter_site: str | None = None
    twitter_creator: str | None = None
    new_line: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class MetaTagsOutput:
    """Output containing the rendered tags and the populated writer."""

    html: str
    tags: CommonMetaTags
    success: bool = True

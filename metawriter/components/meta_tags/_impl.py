"""
Meta tag writers - SSR <head> tag formatter.

Builds <meta>, <title> and <link> tag strings from page, SEO, Open Graph
and Twitter Card field records.

Key behaviors:
- A field set to None is absent and emits no tag
- Tags are emitted in a fixed order per record
- Values are interpolated verbatim (no escaping)
- Pure functions: same field state always produces same output
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TypeGuard

# --- Formatting Configuration ---

NEWLINE_POLICIES = ("live", "snapshot")


@dataclass
class FormattingConfig:
    """
    Formatting settings shared by the tag writers.

    Under the "live" policy a writer reads this object at every write(), so
    changes affect writers already constructed. Under "snapshot" each writer
    keeps a private copy taken at construction.
    """

    use_new_line_between_entries: bool = True
    newline_policy: str = "live"
    omit_empty_values: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        # Checked on every assignment, including the one in __init__
        if name == "newline_policy" and value not in NEWLINE_POLICIES:
            raise ValueError(
                f"Unknown newline_policy: {value!r} "
                f"(expected one of {', '.join(NEWLINE_POLICIES)})"
            )
        super().__setattr__(name, value)

    @property
    def separator(self) -> str:
        return "\n" if self.use_new_line_between_entries else ""


# Process-wide default used by writers constructed without a config
Config = FormattingConfig()


def _config_field() -> FormattingConfig:
    return Config


# --- Tag Rendering ---


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None  # For OG tags
    content: str = ""

    def render(self) -> str:
        if self.property is not None:
            return f'<meta property="{self.property}" content="{self.content}">'
        return f'<meta name="{self.name}" content="{self.content}">'


def is_present(value: str | None, config: FormattingConfig) -> TypeGuard[str]:
    """Check whether a field value should produce a tag."""
    if value is None:
        return False
    if value == "" and config.omit_empty_values:
        return False
    return True


class _TagWriter(ABC):
    """Shared write() for the field records."""

    config: FormattingConfig

    def __post_init__(self) -> None:
        if self.config.newline_policy == "snapshot":
            self.config = replace(self.config)

    @abstractmethod
    def tags(self) -> list[str]:
        """Render the present fields, in order, one tag per entry."""

    def write(self) -> str:
        """Generate the tags for this record, joined per the newline policy."""
        return self.config.separator.join(self.tags())


# --- Field Records ---


@dataclass
class PageMetaTags(_TagWriter):
    """Page-level tags: charset, viewport, theme color."""

    charset: str | None = "UTF-8"
    viewport: str | None = "width=device-width, initial-scale=1.0"
    theme_color: str | None = None
    config: FormattingConfig = field(default_factory=_config_field, repr=False, compare=False)

    def tags(self) -> list[str]:
        tags: list[str] = []
        if is_present(self.charset, self.config):
            tags.append(f'<meta charset="{self.charset}">')
        if is_present(self.viewport, self.config):
            tags.append(MetaTag(name="viewport", content=self.viewport).render())
        if is_present(self.theme_color, self.config):
            tags.append(MetaTag(name="theme-color", content=self.theme_color).render())
        return tags


@dataclass
class SEOMetaTags(_TagWriter):
    """
    Core SEO tags.

    keywords is still read by Bing/Yandex; Google ignores it.
    """

    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    robots: str | None = None
    googlebot: str | None = None
    bingbot: str | None = None
    canonical: str | None = None
    config: FormattingConfig = field(default_factory=_config_field, repr=False, compare=False)

    def tags(self) -> list[str]:
        tags: list[str] = []
        if is_present(self.title, self.config):
            tags.append(f"<title>{self.title}</title>")
        for name in ("description", "keywords", "robots", "googlebot", "bingbot"):
            value = getattr(self, name)
            if is_present(value, self.config):
                tags.append(MetaTag(name=name, content=value).render())
        if is_present(self.canonical, self.config):
            tags.append(f'<link rel="canonical" href="{self.canonical}">')
        return tags


@dataclass
class OpenGraphMetaTags(_TagWriter):
    """Open Graph tags (Facebook, LinkedIn, Discord previews)."""

    title: str | None = None
    description: str | None = None
    image: str | None = None
    url: str | None = None
    type: str | None = "website"
    site_name: str | None = None
    config: FormattingConfig = field(default_factory=_config_field, repr=False, compare=False)

    def tags(self) -> list[str]:
        return [
            MetaTag(property=f"og:{key}", content=value).render()
            for key, value in (
                ("title", self.title),
                ("description", self.description),
                ("image", self.image),
                ("url", self.url),
                ("type", self.type),
                ("site_name", self.site_name),
            )
            if is_present(value, self.config)
        ]


@dataclass
class TwitterMetaTags(_TagWriter):
    """Twitter Card tags. The card type is always written first."""

    card: str | None = "summary_large_image"
    title: str | None = None
    description: str | None = None
    image: str | None = None
    site: str | None = None  # @handle of the site
    creator: str | None = None  # @handle of the author
    config: FormattingConfig = field(default_factory=_config_field, repr=False, compare=False)

    def tags(self) -> list[str]:
        return [
            MetaTag(name=f"twitter:{key}", content=value).render()
            for key, value in (
                ("card", self.card),
                ("title", self.title),
                ("description", self.description),
                ("image", self.image),
                ("site", self.site),
                ("creator", self.creator),
            )
            if is_present(value, self.config)
        ]


# --- Aggregator ---


@dataclass(frozen=True)
class WriteOptions:
    """Options for CommonMetaTags.write()."""

    new_line: bool = False  # separator between blocks, not inside them


class CommonMetaTags:
    """
    Combines the page, SEO, Open Graph and Twitter writers.

    The four records share the aggregator's config and are owned by it.
    Under the snapshot policy the aggregator copies the config once and
    all four records hold that same copy.
    """

    def __init__(self, config: FormattingConfig | None = None) -> None:
        config = config if config is not None else Config
        if config.newline_policy == "snapshot":
            config = replace(config)
        self.config = config
        self.page = PageMetaTags(config=config)
        self.seo = SEOMetaTags(config=config)
        self.og = OpenGraphMetaTags(config=config)
        self.twitter = TwitterMetaTags(config=config)
        # Records copy a snapshot config on construction; share the one copy
        for record in (self.page, self.seo, self.og, self.twitter):
            record.config = config

    def set_title_for_all(self, title: str | None) -> None:
        """Set the title across SEO, Open Graph and Twitter."""
        self.seo.title = title
        self.og.title = title
        self.twitter.title = title

    def set_description_for_all(self, description: str | None) -> None:
        """Set the description across SEO, Open Graph and Twitter."""
        self.seo.description = description
        self.og.description = description
        self.twitter.description = description

    def set_image_for_all(self, image_url: str | None) -> None:
        """Set the preview image across Open Graph and Twitter."""
        self.og.image = image_url
        self.twitter.image = image_url

    def write(self, options: WriteOptions | None = None) -> str:
        """
        Generate all combined tags.

        Blocks are written in page, SEO, Open Graph, Twitter order. Only
        options.new_line controls the separator between blocks; each block's
        inner separator follows its config.
        """
        options = options or WriteOptions()
        return ("\n" if options.new_line else "").join(
            [
                self.page.write(),
                self.seo.write(),
                self.og.write(),
                self.twitter.write(),
            ]
        )

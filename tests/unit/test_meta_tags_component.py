"""
Meta tags component entry point tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from metawriter import (
    CommonMetaTags,
    RenderMetaTagsInput,
    RulesAdapter,
    load_rules,
    run,
    run_write_all,
)


class TestRunWriteAll:
    """Tests for run_write_all without rules."""

    def test_minimal_input(self) -> None:
        """Empty input renders the record defaults."""
        result = run_write_all(RenderMetaTagsInput())

        assert result.success is True
        assert isinstance(result.tags, CommonMetaTags)
        assert result.html == result.tags.write()
        assert '<meta charset="UTF-8">' in result.html

    def test_shared_fields_fan_out(self) -> None:
        result = run_write_all(
            RenderMetaTagsInput(
                title="Post",
                description="Summary",
                image="https://example.com/og.png",
                new_line=True,
            )
        )

        assert result.tags.seo.title == "Post"
        assert result.tags.og.description == "Summary"
        assert result.tags.twitter.image == "https://example.com/og.png"
        assert result.tags.seo.write() in result.html

    def test_record_overrides(self) -> None:
        """Per-record fields land on the right record."""
        result = run_write_all(
            RenderMetaTagsInput(
                canonical="https://example.com/p/post",
                keywords="a, b",
                robots="noindex",
                googlebot="noarchive",
                bingbot="nosnippet",
                theme_color="#000000",
                og_url="https://example.com/p/post",
                og_type="article",
                og_site_name="Example",
                twitter_card="summary",
                twitter_site="@example",
                twitter_creator="@author",
            )
        )
        html = result.html

        assert '<link rel="canonical" href="https://example.com/p/post">' in html
        assert '<meta name="keywords" content="a, b">' in html
        assert '<meta name="robots" content="noindex">' in html
        assert '<meta name="googlebot" content="noarchive">' in html
        assert '<meta name="bingbot" content="nosnippet">' in html
        assert '<meta name="theme-color" content="#000000">' in html
        assert '<meta property="og:url" content="https://example.com/p/post">' in html
        assert '<meta property="og:type" content="article">' in html
        assert '<meta property="og:site_name" content="Example">' in html
        assert '<meta name="twitter:card" content="summary">' in html
        assert '<meta name="twitter:site" content="@example">' in html
        assert '<meta name="twitter:creator" content="@author">' in html

    def test_none_keeps_defaults(self) -> None:
        result = run_write_all(RenderMetaTagsInput(og_type=None, twitter_card=None))

        assert result.tags.og.type == "website"
        assert result.tags.twitter.card == "summary_large_image"


class TestRunWithRules:
    """Tests for run_write_all with a rules port."""

    def test_rules_applied(self, rules_path: Path) -> None:
        """Formatting and defaults come from the rules file."""
        adapter = RulesAdapter(load_rules(rules_path))

        result = run_write_all(RenderMetaTagsInput(title="T", robots=""), rules=adapter)

        assert result.tags.page.charset == "ISO-8859-1"
        assert result.tags.page.viewport is None
        assert result.tags.og.type == "website"
        assert result.html == (
            '<meta charset="ISO-8859-1">'
            "<title>T</title>"
            '<meta property="og:title" content="T">'
            '<meta property="og:type" content="website">'
            '<meta name="twitter:card" content="summary">'
            '<meta name="twitter:title" content="T">'
        )

    def test_rules_config_is_private(self, rules_path: Path) -> None:
        """Each run gets its own config object."""
        adapter = RulesAdapter(load_rules(rules_path))

        first = run_write_all(RenderMetaTagsInput(), rules=adapter)
        second = run_write_all(RenderMetaTagsInput(), rules=adapter)

        assert first.tags.config is not second.tags.config


class TestRunDispatch:
    """Tests for the run() dispatcher."""

    def test_dispatches_render_input(self) -> None:
        inp = RenderMetaTagsInput(title="T")
        assert run(inp).html == run_write_all(inp).html

    def test_unknown_input_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]

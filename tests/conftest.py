from pathlib import Path

import pytest


@pytest.fixture
def rules_path(tmp_path: Path) -> Path:
    """Write a compact-format rules file and return its path."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "formatting:\n"
        "  use_new_line_between_entries: false\n"
        "  newline_policy: snapshot\n"
        "  omit_empty_values: true\n"
        "defaults:\n"
        "  charset: ISO-8859-1\n"
        "  viewport: null\n"
        "  twitter_card: summary\n"
    )
    return path

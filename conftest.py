from collections.abc import Iterator

import pytest

from metawriter.components.meta_tags import Config


@pytest.fixture(autouse=True)
def restore_global_config() -> Iterator[None]:
    """
    Put the process-wide Config back the way each test found it.
    """
    saved = (
        Config.use_new_line_between_entries,
        Config.newline_policy,
        Config.omit_empty_values,
    )
    yield
    (
        Config.use_new_line_between_entries,
        Config.newline_policy,
        Config.omit_empty_values,
    ) = saved

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from featuregraph.models import ChangelogEntry
from tests._fixtures.changelog_builder import ChangelogBuilder, make_entry


@pytest.fixture
def changelog_builder(tmp_path: Path) -> ChangelogBuilder:
    """Provide a reusable changelog builder rooted at the pytest tmp_path."""
    return ChangelogBuilder(tmp_path)


@pytest.fixture
def timeline_entries() -> List[ChangelogEntry]:
    """Two entries where the second builds on the first."""
    return [
        make_entry("1", "Evolution Timeline", "Timeline tracker for evolution"),
        make_entry("2", "Statistics Dashboard", "Dashboard analyzing timeline evolution data"),
    ]

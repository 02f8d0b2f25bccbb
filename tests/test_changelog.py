"""Tests for the changelog record source."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest

from featuregraph.changelog import (
    RecordSourceError,
    entry_from_dict,
    entry_to_dict,
    load_entries,
    parse_changelog,
)
from featuregraph.models import ChangelogEntry
from tests._fixtures.changelog_builder import ChangelogBuilder

SAMPLE = """# Chimera

## Changelog

### Day 1: 2026-01-01
**Feature/Change**: Evolution Timeline
**Description**: Timeline tracker for evolution
**Files Modified**: src/timeline.ts

---

### Day 2: 2026-01-02
**Feature/Change**:   Statistics Dashboard  
**Description**: Dashboard analyzing timeline evolution data
**Files Modified**: src/stats.ts, src/main.ts
"""


def test_parse_changelog_extracts_entries() -> None:
    entries = parse_changelog(SAMPLE)

    assert entries == [
        ChangelogEntry(
            day="1",
            date="2026-01-01",
            feature="Evolution Timeline",
            description="Timeline tracker for evolution",
            files_modified="src/timeline.ts",
        ),
        ChangelogEntry(
            day="2",
            date="2026-01-02",
            feature="Statistics Dashboard",
            description="Dashboard analyzing timeline evolution data",
            files_modified="src/stats.ts, src/main.ts",
        ),
    ]


def test_parse_changelog_without_entries_is_empty() -> None:
    assert parse_changelog("# Nothing here\n") == []
    assert parse_changelog("") == []


def test_load_entries_from_readme(
    changelog_builder: ChangelogBuilder, timeline_entries: List[ChangelogEntry]
) -> None:
    readme = changelog_builder.write_readme(timeline_entries)

    entries = load_entries(readme)

    assert [(entry.day, entry.feature, entry.description) for entry in entries] == [
        (entry.day, entry.feature, entry.description) for entry in timeline_entries
    ]
    assert entries[0].files_modified == "src/main.ts"


def test_load_entries_from_json(tmp_path: Path) -> None:
    source = tmp_path / "entries.json"
    source.write_text(
        json.dumps(
            [
                {"day": "1", "date": "2026-01-01", "feature": "Timeline", "description": "tracker", "filesModified": "a.ts"},
                {"day": 2, "feature": "Search"},
            ]
        ),
        encoding="utf-8",
    )

    entries = load_entries(source)

    assert entries[0] == ChangelogEntry("1", "2026-01-01", "Timeline", "tracker", "a.ts")
    assert entries[1] == ChangelogEntry("2", "", "Search", "", "")


def test_load_entries_rejects_non_list_json(tmp_path: Path) -> None:
    source = tmp_path / "entries.json"
    source.write_text('{"day": "1"}', encoding="utf-8")

    with pytest.raises(RecordSourceError):
        load_entries(source)


def test_load_entries_rejects_invalid_json(tmp_path: Path) -> None:
    source = tmp_path / "entries.json"
    source.write_text("[{", encoding="utf-8")

    with pytest.raises(RecordSourceError):
        load_entries(source)


def test_load_entries_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_entries(tmp_path / "README.md")


def test_entry_dict_uses_camel_case_files_key() -> None:
    entry = entry_from_dict({"day": "3", "files_modified": "x.py"})

    assert entry.files_modified == "x.py"
    assert entry_to_dict(entry)["filesModified"] == "x.py"

"""Helper utilities for writing README changelogs in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable

from featuregraph.models import ChangelogEntry


def make_entry(day: str, feature: str, description: str, date: str = "") -> ChangelogEntry:
    """Build an entry with a date derived from its numeric day."""
    return ChangelogEntry(
        day=day,
        date=date or f"2026-01-{int(day):02d}",
        feature=feature,
        description=description,
    )


class ChangelogBuilder:
    """Writes changelog entries into a throwaway README and project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write_readme(self, entries: Iterable[ChangelogEntry], *, name: str = "README.md") -> Path:
        """Render ``entries`` as ``### Day N`` blocks separated by ``---``."""
        blocks = [
            textwrap.dedent(
                f"""\
                ### Day {entry.day}: {entry.date}
                **Feature/Change**: {entry.feature}
                **Description**: {entry.description}
                **Files Modified**: {entry.files_modified or "src/main.ts"}
                """
            )
            for entry in entries
        ]
        content = "# Project\n\n## Changelog\n\n" + "\n---\n\n".join(blocks)
        path = self.root / name
        path.write_text(content, encoding="utf-8")
        return path

    def write_config(self, content: str) -> Path:
        path = self.root / ".featuregraph.yml"
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def path(self) -> Path:
        return self.root


__all__ = ["ChangelogBuilder", "make_entry"]

"""Record source: turns README changelog sections or JSON exports into entries."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List

from .logging import get_logger
from .models import ChangelogEntry

logger = get_logger("changelog")

_ENTRY_PATTERN = re.compile(
    r"### Day (\d+): (\d{4}-\d{2}-\d{2})\s*\n"
    r"\*\*Feature/Change\*\*: (.+?)\n"
    r"\*\*Description\*\*: (.+?)\n"
    r"\*\*Files Modified\*\*: (.+?)(?=\n---|$)",
    re.DOTALL,
)


class RecordSourceError(ValueError):
    """Raised when a record file does not contain a list of entry objects."""


def parse_changelog(text: str) -> List[ChangelogEntry]:
    """Extract ``### Day N`` changelog blocks from README markdown."""
    entries: List[ChangelogEntry] = []
    for match in _ENTRY_PATTERN.finditer(text or ""):
        day, date, feature, description, files = match.groups()
        entries.append(
            ChangelogEntry(
                day=day,
                date=date,
                feature=feature.strip(),
                description=description.strip(),
                files_modified=files.strip(),
            )
        )
    return entries


def entry_from_dict(payload: Dict[str, Any]) -> ChangelogEntry:
    return ChangelogEntry(
        day=_text(payload.get("day")),
        date=_text(payload.get("date")),
        feature=_text(payload.get("feature")),
        description=_text(payload.get("description")),
        files_modified=_text(payload.get("filesModified", payload.get("files_modified"))),
    )


def entry_to_dict(entry: ChangelogEntry) -> Dict[str, str]:
    return {
        "day": entry.day,
        "date": entry.date,
        "feature": entry.feature,
        "description": entry.description,
        "filesModified": entry.files_modified,
    }


def load_entries(path: Path) -> List[ChangelogEntry]:
    """Load entries from a ``.json`` export or a markdown changelog."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Record source not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        entries = _entries_from_json(text, path)
    else:
        entries = parse_changelog(text)
    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def _entries_from_json(text: str, path: Path) -> List[ChangelogEntry]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordSourceError(f"{path.name} is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise RecordSourceError(f"{path.name} must contain a list of entry objects")
    return [entry_from_dict(item) for item in data]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


__all__ = [
    "RecordSourceError",
    "entry_from_dict",
    "entry_to_dict",
    "load_entries",
    "parse_changelog",
]

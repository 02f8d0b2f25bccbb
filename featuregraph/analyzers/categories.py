"""Keyword classifier assigning a feature category to changelog entries."""

from __future__ import annotations

from typing import Optional, Tuple

OTHER = "Other"

# First group with a matching keyword wins, so the order here is significant.
_CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Visualization", ("visual", "graph", "chart")),
    ("UI/UX", ("ui", "theme", "toggle")),
    ("Search & Filter", ("search", "filter")),
    ("Data & Export", ("export", "data")),
    ("Analytics", ("statistic", "metric", "dashboard")),
    ("Gamification", ("achievement", "milestone")),
    ("AI & Intelligence", ("prediction", "forecast")),
    ("Core Features", ("timeline", "history")),
)

CATEGORIES: Tuple[str, ...] = tuple(label for label, _ in _CATEGORY_KEYWORDS) + (OTHER,)


def categorize(title: Optional[str], description: Optional[str]) -> str:
    """Return the category label for a feature title and description."""
    combined = f"{title or ''} {description or ''}".lower()
    for label, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in combined for keyword in keywords):
            return label
    return OTHER


__all__ = ["CATEGORIES", "OTHER", "categorize"]

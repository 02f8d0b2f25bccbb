"""Fixed colour palette for dependency types and feature categories."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

FALLBACK_COLOR = "#718096"

DEPENDENCY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "builds-on": "#667eea",
        "enhances": "#764ba2",
        "uses": "#48bb78",
    }
)

CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "Visualization": "#9f7aea",
        "UI/UX": "#667eea",
        "Search & Filter": "#48bb78",
        "Data & Export": "#ed8936",
        "Analytics": "#f56565",
        "Gamification": "#ecc94b",
        "AI & Intelligence": "#805ad5",
        "Core Features": "#4299e1",
        "Other": FALLBACK_COLOR,
    }
)


def dependency_color(type_: Optional[str]) -> str:
    return DEPENDENCY_COLORS.get(type_ or "", FALLBACK_COLOR)


def category_color(category: Optional[str]) -> str:
    return CATEGORY_COLORS.get(category or "", CATEGORY_COLORS["Other"])


__all__ = [
    "CATEGORY_COLORS",
    "DEPENDENCY_COLORS",
    "FALLBACK_COLOR",
    "category_color",
    "dependency_color",
]

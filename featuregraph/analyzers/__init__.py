"""Text analyzers that categorize entries and infer dependencies between them."""

from __future__ import annotations

from .categories import CATEGORIES, OTHER, categorize
from .dependencies import DependencyAnalyzer, infer_dependencies
from .rules import DEFAULT_RULES, DEPENDENCY_TYPES, DependencyRule

__all__ = [
    "CATEGORIES",
    "DEFAULT_RULES",
    "DEPENDENCY_TYPES",
    "DependencyAnalyzer",
    "DependencyRule",
    "OTHER",
    "categorize",
    "infer_dependencies",
]

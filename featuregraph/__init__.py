"""Feature dependency inference, analytics and ring layout for changelog entries."""

from .analyzers import CATEGORIES, DependencyAnalyzer, categorize, infer_dependencies
from .builder import build_graph
from .changelog import load_entries, parse_changelog
from .layout import build_connectors, connector_path, layout_nodes
from .models import (
    CategoryCount,
    ChangelogEntry,
    Connector,
    DependencyGraph,
    FeatureDependency,
    FeatureNode,
    GraphStats,
    PositionedNode,
)
from .palette import category_color, dependency_color
from .stats import compute_stats, describe_insights

__all__ = [
    "CATEGORIES",
    "CategoryCount",
    "ChangelogEntry",
    "Connector",
    "DependencyAnalyzer",
    "DependencyGraph",
    "FeatureDependency",
    "FeatureNode",
    "GraphStats",
    "PositionedNode",
    "build_connectors",
    "build_graph",
    "categorize",
    "category_color",
    "compute_stats",
    "connector_path",
    "dependency_color",
    "describe_insights",
    "infer_dependencies",
    "layout_nodes",
    "load_entries",
    "parse_changelog",
]

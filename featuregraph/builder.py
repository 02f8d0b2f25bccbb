"""Assembles categorized nodes and inferred edges into a dependency graph."""

from __future__ import annotations

from typing import Sequence

from .analyzers.categories import categorize
from .analyzers.dependencies import DependencyAnalyzer
from .logging import get_logger
from .models import ChangelogEntry, DependencyGraph, FeatureNode, node_id

logger = get_logger("builder")


def to_node(entry: ChangelogEntry) -> FeatureNode:
    return FeatureNode(
        id=node_id(entry.day),
        name=entry.feature,
        day=entry.day,
        date=entry.date,
        category=categorize(entry.feature, entry.description),
        description=entry.description,
    )


def build_graph(
    entries: Sequence[ChangelogEntry], analyzer: DependencyAnalyzer | None = None
) -> DependencyGraph:
    """Create the full dependency graph for ``entries``, preserving input order."""
    nodes = [to_node(entry) for entry in entries]
    dependencies = (analyzer or DependencyAnalyzer()).analyze(entries)
    logger.debug("Built graph with %d nodes and %d dependencies", len(nodes), len(dependencies))
    return DependencyGraph(nodes=nodes, dependencies=dependencies)


__all__ = ["build_graph", "to_node"]

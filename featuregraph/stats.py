"""Aggregate statistics and insights over a dependency graph."""

from __future__ import annotations

import math
from typing import Dict, List

from .logging import get_logger
from .models import CategoryCount, DependencyGraph, GraphStats

logger = get_logger("stats")


def compute_stats(graph: DependencyGraph) -> GraphStats:
    """Summarise node/edge counts, the foundation node and category distribution."""
    total_nodes = len(graph.nodes)
    total_dependencies = len(graph.dependencies)
    if total_nodes == 0:
        return GraphStats(
            total_nodes=0,
            total_dependencies=0,
            avg_dependencies=0,
            foundation_node="",
            foundation_dependencies=0,
            categories=[],
        )

    incoming: Dict[str, int] = {}
    for dependency in graph.dependencies:
        incoming[dependency.target] = incoming.get(dependency.target, 0) + 1

    # Strict comparison: on a tie the id that first received an edge keeps the lead.
    foundation_node = ""
    foundation_dependencies = 0
    for target, count in incoming.items():
        if count > foundation_dependencies:
            foundation_node = target
            foundation_dependencies = count

    category_counts: Dict[str, int] = {}
    for node in graph.nodes:
        category_counts[node.category] = category_counts.get(node.category, 0) + 1

    if foundation_node:
        logger.debug(
            "Foundation node %s with %d incoming dependencies",
            foundation_node,
            foundation_dependencies,
        )

    return GraphStats(
        total_nodes=total_nodes,
        total_dependencies=total_dependencies,
        avg_dependencies=_round_half_up(total_dependencies / total_nodes),
        foundation_node=foundation_node,
        foundation_dependencies=foundation_dependencies,
        categories=[CategoryCount(name=name, count=count) for name, count in category_counts.items()],
    )


def describe_insights(graph: DependencyGraph, stats: GraphStats) -> List[str]:
    """Return human-readable sentences about the foundation node and category spread."""
    if not stats.foundation_node:
        return []
    foundation = next((node for node in graph.nodes if node.id == stats.foundation_node), None)
    if foundation is None:
        return []
    return [
        f"{foundation.name} is the foundation of the project's evolution, "
        f"with {stats.foundation_dependencies} features building upon it.",
        f"The codebase has evolved through {len(stats.categories)} distinct categories.",
    ]


def _round_half_up(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


__all__ = ["compute_stats", "describe_insights"]

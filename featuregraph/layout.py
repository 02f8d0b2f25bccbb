"""Ring layout and curved connector paths for rendering a dependency graph."""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

from .models import Connector, DependencyGraph, PositionedNode
from .palette import dependency_color

RADIUS_RATIO = 0.35
CURVE_OFFSET = 20.0
MIN_STROKE_WIDTH = 2.0


def layout_nodes(graph: DependencyGraph, width: float, height: float) -> List[PositionedNode]:
    """Place nodes evenly on a circle, index 0 at twelve o'clock, proceeding clockwise."""
    count = len(graph.nodes)
    if count == 0:
        return []

    radius = min(width, height) * RADIUS_RATIO
    center_x = width / 2
    center_y = height / 2

    positions: List[PositionedNode] = []
    for index, node in enumerate(graph.nodes):
        angle = (index / count) * 2 * math.pi - math.pi / 2
        positions.append(
            PositionedNode(
                node=node,
                x=center_x + radius * math.cos(angle),
                y=center_y + radius * math.sin(angle),
            )
        )
    return positions


def connector_path(start: PositionedNode, end: PositionedNode) -> str:
    """Return an SVG path bowing from ``start`` to ``end`` through an offset control point."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return f"M {format_number(start.x)},{format_number(start.y)}"

    control_x = (start.x + end.x) / 2 - dy / length * CURVE_OFFSET
    control_y = (start.y + end.y) / 2 + dx / length * CURVE_OFFSET
    return (
        f"M {format_number(start.x)},{format_number(start.y)} "
        f"Q {format_number(control_x)},{format_number(control_y)} "
        f"{format_number(end.x)},{format_number(end.y)}"
    )


def build_connectors(
    graph: DependencyGraph, positions: Sequence[PositionedNode]
) -> List[Connector]:
    """Pair each dependency with its path and styling; edges with a missing endpoint are skipped."""
    by_id: Dict[str, PositionedNode] = {}
    for position in positions:
        by_id.setdefault(position.id, position)

    connectors: List[Connector] = []
    for dependency in graph.dependencies:
        start = by_id.get(dependency.source)
        end = by_id.get(dependency.target)
        if start is None or end is None:
            continue
        connectors.append(
            Connector(
                dependency=dependency,
                path=connector_path(start, end),
                color=dependency_color(dependency.type),
                stroke_width=max(MIN_STROKE_WIDTH, dependency.strength * 3),
            )
        )
    return connectors


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``, without a trailing ``.0`` for integers."""
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


__all__ = [
    "CURVE_OFFSET",
    "RADIUS_RATIO",
    "build_connectors",
    "connector_path",
    "format_number",
    "layout_nodes",
]

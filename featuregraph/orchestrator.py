"""Pipeline orchestration: entries -> graph -> stats, layout and connectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .analyzers.dependencies import DependencyAnalyzer
from .builder import build_graph
from .changelog import load_entries
from .config import CONFIG_FILENAME, FeatureGraphConfig, LayoutConfig, load_config
from .layout import build_connectors, layout_nodes
from .logging import get_logger
from .models import (
    ChangelogEntry,
    Connector,
    DependencyGraph,
    FeatureDependency,
    FeatureNode,
    GraphStats,
    PositionedNode,
)
from .palette import category_color
from .stats import compute_stats, describe_insights


@dataclass
class AnalysisReport:
    """Everything a renderer needs for one analysis pass."""

    entries: List[ChangelogEntry]
    graph: DependencyGraph
    stats: GraphStats
    positions: List[PositionedNode]
    connectors: List[Connector]
    width: float
    height: float
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "canvas": {"width": self.width, "height": self.height},
            "nodes": [_node_to_dict(node) for node in self.graph.nodes],
            "dependencies": [_dependency_to_dict(dep) for dep in self.graph.dependencies],
            "stats": _stats_to_dict(self.stats),
            "positions": [
                {
                    **_node_to_dict(position.node),
                    "x": position.x,
                    "y": position.y,
                    "color": category_color(position.node.category),
                }
                for position in self.positions
            ],
            "connectors": [
                {
                    **_dependency_to_dict(connector.dependency),
                    "path": connector.path,
                    "color": connector.color,
                    "strokeWidth": connector.stroke_width,
                }
                for connector in self.connectors
            ],
            "insights": list(self.insights),
        }

    def summary_lines(self) -> List[str]:
        stats = self.stats
        lines = [
            f"Features: {stats.total_nodes}",
            f"Dependencies: {stats.total_dependencies}",
            f"Avg connections: {stats.avg_dependencies}",
            f"Categories: {len(stats.categories)}",
        ]
        for category in stats.categories:
            lines.append(f"  {category.name}: {category.count}")
        if stats.foundation_node:
            lines.append(
                f"Foundation: {stats.foundation_node} ({stats.foundation_dependencies} incoming)"
            )
        lines.extend(self.insights)
        return lines


class Orchestrator:
    """Coordinates a full analysis pass over a record source."""

    def __init__(
        self,
        config: FeatureGraphConfig | None = None,
        analyzer: DependencyAnalyzer | None = None,
    ) -> None:
        self.config = config
        self.analyzer = analyzer or DependencyAnalyzer()
        self.logger = get_logger("orchestrator")

    def run_analyze(
        self,
        source: str | Path | None = None,
        *,
        width: float | None = None,
        height: float | None = None,
    ) -> AnalysisReport:
        """Load entries from ``source`` (or the configured source) and analyze them."""
        config = self._resolve_config(source)
        source_path = self._resolve_source(source, config)
        self.logger.info("Analyzing %s", source_path)
        entries = load_entries(source_path)
        return self.analyze_entries(entries, width=width, height=height, config=config)

    def analyze_entries(
        self,
        entries: Sequence[ChangelogEntry],
        *,
        width: float | None = None,
        height: float | None = None,
        config: FeatureGraphConfig | None = None,
    ) -> AnalysisReport:
        config = config or self.config
        canvas_width = width if width is not None else _configured_width(config)
        canvas_height = height if height is not None else _configured_height(config)

        entry_list = list(entries)
        graph = build_graph(entry_list, self.analyzer)
        stats = compute_stats(graph)
        positions = layout_nodes(graph, canvas_width, canvas_height)
        connectors = build_connectors(graph, positions)
        self.logger.info(
            "Analyzed %d features with %d dependencies",
            stats.total_nodes,
            stats.total_dependencies,
        )
        return AnalysisReport(
            entries=entry_list,
            graph=graph,
            stats=stats,
            positions=positions,
            connectors=connectors,
            width=canvas_width,
            height=canvas_height,
            insights=describe_insights(graph, stats),
        )

    def _resolve_config(self, source: str | Path | None) -> FeatureGraphConfig:
        if self.config is not None:
            return self.config
        if source is None:
            return load_config(Path.cwd())
        source_path = Path(source).expanduser()
        base = source_path if source_path.is_dir() else source_path.parent
        return load_config(base / CONFIG_FILENAME)

    @staticmethod
    def _resolve_source(source: str | Path | None, config: FeatureGraphConfig) -> Path:
        if source is not None:
            path = Path(source).expanduser().resolve()
            if path.is_dir():
                return path / "README.md"
            return path
        if config.source is not None:
            return config.source
        return config.root / "README.md"


def _configured_width(config: FeatureGraphConfig | None) -> float:
    return (config.layout if config is not None else LayoutConfig()).width


def _configured_height(config: FeatureGraphConfig | None) -> float:
    return (config.layout if config is not None else LayoutConfig()).height


def _node_to_dict(node: FeatureNode) -> Dict[str, Any]:
    return {
        "id": node.id,
        "name": node.name,
        "day": node.day,
        "date": node.date,
        "category": node.category,
        "description": node.description,
    }


def _dependency_to_dict(dependency: FeatureDependency) -> Dict[str, Any]:
    return {
        "from": dependency.source,
        "to": dependency.target,
        "type": dependency.type,
        "strength": dependency.strength,
    }


def _stats_to_dict(stats: GraphStats) -> Dict[str, Any]:
    return {
        "totalNodes": stats.total_nodes,
        "totalDependencies": stats.total_dependencies,
        "avgDependencies": stats.avg_dependencies,
        "foundationNode": stats.foundation_node,
        "foundationDependencies": stats.foundation_dependencies,
        "categories": [
            {"name": category.name, "count": category.count} for category in stats.categories
        ],
    }


__all__ = ["AnalysisReport", "Orchestrator"]

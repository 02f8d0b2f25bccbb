"""SVG export of an analysis report."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from ..config import RenderConfig
from ..layout import format_number
from ..orchestrator import AnalysisReport
from ..palette import DEPENDENCY_COLORS, category_color

_TEMPLATE_NAME = "graph.svg.j2"

_LEGEND_LABELS: Dict[str, str] = {
    "builds-on": "Builds On",
    "enhances": "Enhances",
    "uses": "Uses",
}


@dataclass(frozen=True)
class _LegendItem:
    label: str
    color: str


class SvgRenderer:
    """Renders connectors, nodes and a legend into a standalone SVG document."""

    def __init__(
        self,
        settings: RenderConfig | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.settings = settings or RenderConfig()
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["num"] = format_number

    def render(self, report: AnalysisReport) -> str:
        names = {node.id: node.name for node in reversed(report.graph.nodes)}
        connectors = [
            {
                "path": connector.path,
                "color": connector.color,
                "stroke_width": connector.stroke_width,
                "tooltip": (
                    f"{names.get(connector.dependency.source, connector.dependency.source)} "
                    f"{connector.dependency.type} "
                    f"{names.get(connector.dependency.target, connector.dependency.target)}"
                ),
            }
            for connector in report.connectors
        ]
        nodes = [
            {
                "id": position.id,
                "x": position.x,
                "y": position.y,
                "day": position.node.day,
                "fill": category_color(position.node.category),
                "tooltip": (
                    f"Day {position.node.day}: {position.node.name}\n"
                    f"{position.node.category}\n{position.node.date}"
                ),
            }
            for position in report.positions
        ]
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(
            title=self.settings.title,
            width=report.width,
            height=report.height,
            radius=self.settings.node_radius,
            connectors=connectors,
            nodes=nodes,
            dependency_legend=self._dependency_legend(),
            category_legend=self._category_legend(report),
        )

    def write(self, report: AnalysisReport, output: Path) -> Path:
        output = Path(output).expanduser()
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(report), encoding="utf-8")
        return output

    @staticmethod
    def _dependency_legend() -> List[_LegendItem]:
        return [
            _LegendItem(label=_LEGEND_LABELS[type_], color=color)
            for type_, color in DEPENDENCY_COLORS.items()
        ]

    def _category_legend(self, report: AnalysisReport) -> List[_LegendItem]:
        top = report.stats.categories[: self.settings.legend_categories]
        return [
            _LegendItem(label=f"{category.name} ({category.count})", color=category_color(category.name))
            for category in top
        ]


__all__ = ["SvgRenderer"]

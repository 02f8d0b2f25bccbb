"""Tests for SVG export."""

from __future__ import annotations

from pathlib import Path
from typing import List

from featuregraph.config import RenderConfig
from featuregraph.models import ChangelogEntry
from featuregraph.orchestrator import Orchestrator
from featuregraph.render import SvgRenderer
from tests._fixtures.changelog_builder import make_entry


def test_render_draws_connectors_and_nodes(timeline_entries: List[ChangelogEntry]) -> None:
    report = Orchestrator().analyze_entries(timeline_entries)

    svg = SvgRenderer().render(report)

    assert svg.startswith("<svg")
    assert svg.count('class="dependency-line"') == 1
    assert svg.count('class="node-circle"') == 2
    assert 'viewBox="0 0 800 600"' in svg
    assert f'd="{report.connectors[0].path}"' in svg
    assert "Statistics Dashboard builds-on Evolution Timeline" in svg
    assert 'stroke-width="2.7"' in svg
    assert 'r="30"' in svg


def test_render_escapes_markup_in_text() -> None:
    entries = [make_entry("1", "Search <fast> & filter", "search entries")]
    report = Orchestrator().analyze_entries(entries)

    svg = SvgRenderer().render(report)

    assert "Search &lt;fast&gt; &amp; filter" in svg
    assert "Search &amp; Filter (1)" in svg
    assert "<fast>" not in svg


def test_render_limits_category_legend() -> None:
    entries = [
        make_entry("1", "Graph", "chart"),
        make_entry("2", "Theme", "toggle"),
        make_entry("3", "Search", "filter"),
    ]
    report = Orchestrator().analyze_entries(entries)

    svg = SvgRenderer(RenderConfig(legend_categories=2, title="Features")).render(report)

    assert "Visualization (1)" in svg
    assert "UI/UX (1)" in svg
    assert "Search &amp; Filter (1)" not in svg
    assert "<title>Features</title>" in svg


def test_render_empty_report_has_no_nodes() -> None:
    svg = SvgRenderer().render(Orchestrator().analyze_entries([]))

    assert 'class="node-circle"' not in svg
    assert "Top Categories" not in svg
    assert "Builds On" in svg


def test_write_creates_parent_directories(timeline_entries: List[ChangelogEntry], tmp_path: Path) -> None:
    report = Orchestrator().analyze_entries(timeline_entries)

    output = SvgRenderer().write(report, tmp_path / "nested" / "graph.svg")

    assert output.exists()
    assert output.read_text(encoding="utf-8").rstrip().endswith("</svg>")

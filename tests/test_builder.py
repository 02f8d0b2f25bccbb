"""Tests for graph assembly."""

from __future__ import annotations

from typing import List

from featuregraph.builder import build_graph
from featuregraph.models import ChangelogEntry
from tests._fixtures.changelog_builder import make_entry


def test_build_graph_on_empty_input_is_empty() -> None:
    graph = build_graph([])

    assert graph.nodes == []
    assert graph.dependencies == []


def test_build_graph_maps_entries_to_nodes(timeline_entries: List[ChangelogEntry]) -> None:
    graph = build_graph(timeline_entries)

    first, second = graph.nodes
    assert first.id == "day-1"
    assert first.name == "Evolution Timeline"
    assert first.day == "1"
    assert first.date == "2026-01-01"
    assert first.category == "Core Features"
    assert first.description == "Timeline tracker for evolution"
    assert second.category == "Data & Export"
    assert [(dep.source, dep.target, dep.type) for dep in graph.dependencies] == [
        ("day-2", "day-1", "builds-on")
    ]


def test_build_graph_keeps_duplicate_days() -> None:
    graph = build_graph(
        [
            make_entry("4", "Timeline", "timeline tracker"),
            make_entry("4", "Timeline fix", "timeline bugfix"),
        ]
    )

    assert [node.id for node in graph.nodes] == ["day-4", "day-4"]


def test_build_graph_edges_only_point_backwards() -> None:
    entries = [
        make_entry("1", "Statistics", "history statistics"),
        make_entry("2", "Timeline", "timeline tracker"),
        make_entry("3", "Export", "export timeline data and statistics"),
        make_entry("4", "Achievements", "milestone achievement badges built from statistics"),
        make_entry("5", "Prediction", "AI prediction over the timeline"),
    ]
    index_of = {f"day-{entry.day}": index for index, entry in enumerate(entries)}

    graph = build_graph(entries)

    assert graph.dependencies
    for dependency in graph.dependencies:
        assert index_of[dependency.target] < index_of[dependency.source]

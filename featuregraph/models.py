"""Core data models shared across featuregraph components."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ChangelogEntry:
    """One feature-change record as supplied by the record source."""

    day: str
    date: str
    feature: str
    description: str
    files_modified: str = ""


@dataclass(frozen=True)
class FeatureNode:
    """Categorized view of a single changelog entry."""

    id: str
    name: str
    day: str
    date: str
    category: str
    description: str


@dataclass(frozen=True)
class FeatureDependency:
    """Directed edge from a feature to an earlier feature it relies on."""

    source: str
    target: str
    type: str
    strength: float


@dataclass
class DependencyGraph:
    """Nodes in input order plus the inferred dependency edges."""

    nodes: List[FeatureNode] = field(default_factory=list)
    dependencies: List[FeatureDependency] = field(default_factory=list)


@dataclass(frozen=True)
class PositionedNode:
    """Feature node placed on the layout canvas."""

    node: FeatureNode
    x: float
    y: float

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def name(self) -> str:
        return self.node.name


@dataclass(frozen=True)
class CategoryCount:
    name: str
    count: int


@dataclass(frozen=True)
class GraphStats:
    """Aggregate snapshot of a dependency graph."""

    total_nodes: int
    total_dependencies: int
    avg_dependencies: float
    foundation_node: str
    foundation_dependencies: int
    categories: List[CategoryCount] = field(default_factory=list)


@dataclass(frozen=True)
class Connector:
    """Render-ready description of one dependency edge."""

    dependency: FeatureDependency
    path: str
    color: str
    stroke_width: float


def node_id(day: str) -> str:
    """Return the graph identifier for a changelog day."""
    return f"day-{day}"

"""Dependency rule table used by the inference engine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple

BUILDS_ON = "builds-on"
ENHANCES = "enhances"
USES = "uses"

DEPENDENCY_TYPES: Tuple[str, ...] = (BUILDS_ON, ENHANCES, USES)


@dataclass(frozen=True)
class DependencyRule:
    """Evidence test plus the earlier features it points at when it fires."""

    pattern: Pattern[str]
    depends_on: Tuple[str, ...]
    type: str
    strength: float

    def matches(self, *texts: str) -> bool:
        return any(self.pattern.search(text) for text in texts)


def _rule(pattern: str, depends_on: Tuple[str, ...], type_: str, strength: float) -> DependencyRule:
    return DependencyRule(
        pattern=re.compile(pattern, re.IGNORECASE),
        depends_on=depends_on,
        type=type_,
        strength=strength,
    )


DEFAULT_RULES: Mapping[str, Tuple[DependencyRule, ...]] = MappingProxyType(
    {
        "statistics": (
            _rule(r"timeline|evolution|history", ("timeline", "changelog"), BUILDS_ON, 0.9),
        ),
        "search": (
            _rule(r"timeline|evolution", ("timeline",), ENHANCES, 0.8),
        ),
        "impact": (
            _rule(r"visual|graph", ("timeline", "statistics"), BUILDS_ON, 0.7),
        ),
        "prediction": (
            _rule(r"ai|prediction", ("timeline", "statistics"), USES, 0.8),
        ),
        "export": (
            _rule(r"data|export", ("timeline", "statistics"), USES, 0.7),
        ),
        "achievement": (
            _rule(r"achievement|milestone", ("timeline", "statistics"), USES, 0.8),
        ),
        "metrics": (
            _rule(r"metric|code", ("statistics", "timeline"), BUILDS_ON, 0.7),
        ),
        "theme": (
            _rule(r"theme|dark|light", ("timeline", "dashboard"), ENHANCES, 0.6),
        ),
    }
)


__all__ = [
    "BUILDS_ON",
    "DEFAULT_RULES",
    "DEPENDENCY_TYPES",
    "DependencyRule",
    "ENHANCES",
    "USES",
]

"""Backward-looking dependency inference over changelog entries."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from ..logging import get_logger
from ..models import ChangelogEntry, FeatureDependency, node_id
from .rules import DEFAULT_RULES, DependencyRule

logger = get_logger("analyzers.dependencies")


class DependencyAnalyzer:
    """Emits typed, weighted edges from each entry to earlier entries it relies on.

    For every trigger keyword found in an entry's lower-cased title or description, each
    rule whose pattern matches the original-case text is applied: every depends-on keyword
    is resolved to the first earlier entry mentioning it. Edges therefore only ever point
    backwards in input order, and duplicates between the same pair are kept.
    """

    def __init__(self, rules: Optional[Mapping[str, Sequence[DependencyRule]]] = None) -> None:
        self.rules = DEFAULT_RULES if rules is None else rules

    def analyze(self, entries: Sequence[ChangelogEntry]) -> List[FeatureDependency]:
        lowered: List[Tuple[str, str]] = [
            ((entry.feature or "").lower(), (entry.description or "").lower())
            for entry in entries
        ]
        dependencies: List[FeatureDependency] = []

        for index, entry in enumerate(entries):
            feature_lower, description_lower = lowered[index]
            for trigger, rules in self.rules.items():
                if trigger not in feature_lower and trigger not in description_lower:
                    continue
                for rule in rules:
                    if not rule.matches(entry.feature or "", entry.description or ""):
                        continue
                    for keyword in rule.depends_on:
                        earlier = _first_mention(entries, lowered, keyword, before=index)
                        if earlier is None:
                            continue
                        dependencies.append(
                            FeatureDependency(
                                source=node_id(entry.day),
                                target=node_id(earlier.day),
                                type=rule.type,
                                strength=rule.strength,
                            )
                        )

        logger.debug("Inferred %d dependencies across %d entries", len(dependencies), len(entries))
        return dependencies


def _first_mention(
    entries: Sequence[ChangelogEntry],
    lowered: Sequence[Tuple[str, str]],
    keyword: str,
    *,
    before: int,
) -> Optional[ChangelogEntry]:
    for position in range(before):
        feature_lower, description_lower = lowered[position]
        if keyword in feature_lower or keyword in description_lower:
            return entries[position]
    return None


def infer_dependencies(entries: Sequence[ChangelogEntry]) -> List[FeatureDependency]:
    """Run the default rule table over ``entries``."""
    return DependencyAnalyzer().analyze(entries)


__all__ = ["DependencyAnalyzer", "infer_dependencies"]

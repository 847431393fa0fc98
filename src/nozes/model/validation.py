"""Data-quality checks for identification keys.

The matching engine tolerates bad references (they simply never match), so
nothing here raises. Issues are reported for the authoring layer to show.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from nozes.model.project import Project


class IssueKind(str, Enum):
    """Kind of data-quality issue."""

    DUPLICATE_FEATURE = "duplicate_feature"
    DUPLICATE_STATE = "duplicate_state"
    DUPLICATE_ENTITY = "duplicate_entity"
    DANGLING_FEATURE = "dangling_feature"  # trait keyed by an unknown feature
    DANGLING_STATE = "dangling_state"  # trait state not in its feature


@dataclass
class ValidationIssue:
    """A single data-quality issue."""

    kind: IssueKind
    message: str
    feature_id: str | None = None
    state_id: str | None = None
    entity_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        d: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.feature_id is not None:
            d["feature_id"] = self.feature_id
        if self.state_id is not None:
            d["state_id"] = self.state_id
        if self.entity_id is not None:
            d["entity_id"] = self.entity_id
        return d


def _duplicates(ids: list[str]) -> list[str]:
    seen: set[str] = set()
    dups: list[str] = []
    for item in ids:
        if item in seen and item not in dups:
            dups.append(item)
        seen.add(item)
    return dups


def validate_project(project: Project) -> list[ValidationIssue]:
    """Check id uniqueness and trait references.

    Args:
        project: Project to check.

    Returns:
        List of issues, empty when the project is clean.
    """
    issues: list[ValidationIssue] = []

    for feature_id in _duplicates([f.id for f in project.features]):
        issues.append(
            ValidationIssue(
                IssueKind.DUPLICATE_FEATURE,
                f"Feature id '{feature_id}' is used more than once",
                feature_id=feature_id,
            )
        )

    for feature in project.features:
        for state_id in _duplicates([s.id for s in feature.states]):
            issues.append(
                ValidationIssue(
                    IssueKind.DUPLICATE_STATE,
                    f"Feature '{feature.name}': state id '{state_id}' is used more than once",
                    feature_id=feature.id,
                    state_id=state_id,
                )
            )

    for entity_id in _duplicates([e.id for e in project.entities]):
        issues.append(
            ValidationIssue(
                IssueKind.DUPLICATE_ENTITY,
                f"Entity id '{entity_id}' is used more than once",
                entity_id=entity_id,
            )
        )

    # First feature wins when ids are duplicated, matching lookup order
    features = {}
    for feature in project.features:
        features.setdefault(feature.id, feature)

    for entity in project.entities:
        for feature_id, state_ids in entity.traits.items():
            feature = features.get(feature_id)
            if feature is None:
                issues.append(
                    ValidationIssue(
                        IssueKind.DANGLING_FEATURE,
                        f"Entity '{entity.name}': traits reference unknown feature '{feature_id}'",
                        feature_id=feature_id,
                        entity_id=entity.id,
                    )
                )
                continue
            known = {s.id for s in feature.states}
            for state_id in state_ids:
                if state_id not in known:
                    issues.append(
                        ValidationIssue(
                            IssueKind.DANGLING_STATE,
                            f"Entity '{entity.name}': feature '{feature.name}' "
                            f"has no state '{state_id}'",
                            feature_id=feature_id,
                            state_id=state_id,
                            entity_id=entity.id,
                        )
                    )

    return issues

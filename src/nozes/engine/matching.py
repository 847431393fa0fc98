"""Matching engine: partition entities by the current selection.

Within one feature the selected states combine with OR, across features with
AND. An entity with no recorded states for a constrained feature fails that
constraint. With nothing selected every entity remains.

The standalone document carries its own copy of this logic in
``nozes/export/assets/engine.js``; both must give the same partition for
the same project and selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nozes.engine.selection import SelectionState
from nozes.model.project import Entity, Project


@dataclass
class Classification:
    """Result of classifying a project's entities."""

    remaining: list[Entity] = field(default_factory=list)
    discarded: list[Entity] = field(default_factory=list)
    total_selected: int = 0

    @property
    def remaining_ids(self) -> list[str]:
        return [e.id for e in self.remaining]

    @property
    def discarded_ids(self) -> list[str]:
        return [e.id for e in self.discarded]

    @property
    def identified(self) -> Entity | None:
        """The single remaining entity, if exactly one remains."""
        if len(self.remaining) == 1:
            return self.remaining[0]
        return None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary of entity ids and counters."""
        return {
            "remaining": self.remaining_ids,
            "discarded": self.discarded_ids,
            "remaining_count": len(self.remaining),
            "discarded_count": len(self.discarded),
            "total_selected": self.total_selected,
        }


def entity_matches(entity: Entity, state: SelectionState) -> bool:
    """Check whether an entity satisfies every active feature constraint."""
    for feature_id, selected in state.items():
        entity_states = entity.traits.get(feature_id, ())
        if selected.isdisjoint(entity_states):
            return False
    return True


def classify(project: Project, state: SelectionState) -> Classification:
    """Partition entities into remaining and discarded.

    Both groups keep the order of ``project.entities``.

    Args:
        project: Project whose entities are classified.
        state: Current selection.

    Returns:
        Classification with both partitions and the selection counter.
    """
    result = Classification(total_selected=state.total_selected)
    for entity in project.entities:
        if entity_matches(entity, state):
            result.remaining.append(entity)
        else:
            result.discarded.append(entity)
    return result

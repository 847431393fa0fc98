"""Identification session: one player run over a project.

The session owns exactly one selection and the read-path view state of the
player (which partition is shown, entity detail lookup). It never mutates
the project.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from nozes.engine.matching import Classification, classify
from nozes.engine.selection import SelectionState
from nozes.model.project import Entity, ExternalLink, Project

logger = logging.getLogger(__name__)

UNKNOWN_STATE_LABEL = "?"


@dataclass
class TraitLine:
    """One feature's states as shown in an entity detail view."""

    feature_id: str
    feature_name: str
    labels: list[str]

    @property
    def text(self) -> str:
        return ", ".join(self.labels)


@dataclass
class EntityDetail:
    """Everything the player shows when an entity is inspected."""

    id: str
    name: str
    description: str
    image_url: str | None = None
    links: list[ExternalLink] = field(default_factory=list)
    traits: list[TraitLine] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image_url": self.image_url,
            "links": [
                {"label": link.label or link.url, "url": link.url} for link in self.links
            ],
            "traits": {t.feature_name: t.labels for t in self.traits},
        }


def describe_entity(project: Project, entity: Entity) -> EntityDetail:
    """Build the detail view of an entity.

    Only features the entity has recorded states for are listed, in project
    feature order. State ids missing from the feature show as "?".
    """
    lines = []
    for feature in project.features:
        state_ids = entity.traits.get(feature.id)
        if not state_ids:
            continue
        lines.append(
            TraitLine(
                feature_id=feature.id,
                feature_name=feature.name,
                labels=feature.state_labels(state_ids, placeholder=UNKNOWN_STATE_LABEL),
            )
        )
    return EntityDetail(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        image_url=entity.image_url,
        links=list(entity.links),
        traits=lines,
    )


class IdentificationSession:
    """Interactive identification over a single project.

    Example:
        >>> session = IdentificationSession(project)
        >>> session.toggle("f1", "s1")
        >>> [e.name for e in session.visible_entities]
    """

    def __init__(self, project: Project):
        """Start a session with an empty selection.

        Args:
            project: Project to identify against.
        """
        self.project = project
        self.selection = SelectionState()
        self.show_discarded = False
        self._cache: tuple[SelectionState, Classification] | None = None

    def toggle(self, feature_id: str, state_id: str) -> SelectionState:
        """Toggle a state and return the new selection."""
        self.selection = self.selection.toggle(feature_id, state_id)
        logger.debug(f"Toggled {feature_id}:{state_id} ({self.selection.total_selected} selected)")
        return self.selection

    def reset(self) -> SelectionState:
        """Clear the selection and go back to the remaining view."""
        self.selection = self.selection.reset()
        self.show_discarded = False
        return self.selection

    def set_show_discarded(self, value: bool) -> None:
        self.show_discarded = value

    @property
    def classification(self) -> Classification:
        """Partition for the current selection, recomputed when it changes."""
        if self._cache is None or self._cache[0] != self.selection:
            self._cache = (self.selection, classify(self.project, self.selection))
        return self._cache[1]

    @property
    def visible_entities(self) -> list[Entity]:
        """Entities in the partition currently being shown."""
        result = self.classification
        return result.discarded if self.show_discarded else result.remaining

    def status(self) -> dict[str, Any]:
        """Counters for the player header."""
        result = self.classification
        return {
            "remaining": len(result.remaining),
            "discarded": len(result.discarded),
            "total_selected": self.selection.total_selected,
            "identified": result.identified.id if result.identified else None,
        }

    def describe(self, entity_id: str) -> EntityDetail | None:
        """Detail view for an entity, or None if the id is unknown."""
        entity = self.project.get_entity(entity_id)
        if entity is None:
            return None
        return describe_entity(self.project, entity)

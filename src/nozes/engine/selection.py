"""Selection state for an identification run.

A selection maps feature ids to the non-empty set of state ids the user has
chosen. A feature with no chosen states is absent from the mapping, never
present with an empty set.

Selections are immutable values: every operation returns a new selection,
so one session can keep history or compare states without copying.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SelectionState:
    """Which states are selected, per feature."""

    selections: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {
            feature_id: frozenset(state_ids)
            for feature_id, state_ids in self.selections.items()
            if state_ids
        }
        object.__setattr__(self, "selections", cleaned)

    def toggle(self, feature_id: str, state_id: str) -> SelectionState:
        """Select the state if unselected, otherwise unselect it.

        Ids that do not exist in the project are accepted; they never match.
        """
        current = self.selections.get(feature_id, frozenset())
        if state_id in current:
            updated = current - {state_id}
        else:
            updated = current | {state_id}

        selections = dict(self.selections)
        if updated:
            selections[feature_id] = updated
        else:
            selections.pop(feature_id, None)
        return SelectionState(selections)

    def reset(self) -> SelectionState:
        """Clear all selections."""
        return SelectionState()

    def __hash__(self) -> int:
        return hash(frozenset(self.selections.items()))

    @property
    def total_selected(self) -> int:
        """Number of selected states across all features."""
        return sum(len(states) for states in self.selections.values())

    @property
    def is_empty(self) -> bool:
        return not self.selections

    def selected(self, feature_id: str) -> frozenset[str]:
        """Selected state ids for a feature (empty when none)."""
        return self.selections.get(feature_id, frozenset())

    def is_selected(self, feature_id: str, state_id: str) -> bool:
        return state_id in self.selected(feature_id)

    def items(self) -> Iterator[tuple[str, frozenset[str]]]:
        """Iterate (feature id, selected state ids) pairs."""
        return iter(self.selections.items())

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to dictionary with sorted state id lists."""
        return {k: sorted(v) for k, v in self.selections.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SelectionState:
        """Create from a feature id -> state ids mapping."""
        return cls({k: frozenset(v) for k, v in data.items()})


def create_selection_state() -> SelectionState:
    """Create the empty selection a session starts with."""
    return SelectionState()


def toggle(state: SelectionState, feature_id: str, state_id: str) -> SelectionState:
    """Toggle one state, returning the new selection."""
    return state.toggle(feature_id, state_id)


def reset(state: SelectionState | None = None) -> SelectionState:
    """Return the empty selection."""
    return SelectionState()


def total_selected(state: SelectionState) -> int:
    """Number of selected states across all features."""
    return state.total_selected

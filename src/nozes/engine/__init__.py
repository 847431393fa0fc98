"""Selection state and matching engine.

This package has no I/O and no dependency on configuration, so the same
semantics can be mirrored exactly by the standalone document.
"""

from nozes.engine.matching import Classification, classify, entity_matches
from nozes.engine.selection import (
    SelectionState,
    create_selection_state,
    reset,
    toggle,
    total_selected,
)
from nozes.engine.session import (
    EntityDetail,
    IdentificationSession,
    TraitLine,
    describe_entity,
)

__all__ = [
    # Selection
    "SelectionState",
    "create_selection_state",
    "toggle",
    "reset",
    "total_selected",
    # Matching
    "Classification",
    "classify",
    "entity_matches",
    # Session
    "IdentificationSession",
    "EntityDetail",
    "TraitLine",
    "describe_entity",
]

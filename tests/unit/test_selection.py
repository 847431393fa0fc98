"""Tests for selection state."""

from nozes.engine.selection import (
    SelectionState,
    create_selection_state,
    reset,
    toggle,
    total_selected,
)


class TestToggle:
    """Tests for toggling states."""

    def test_new_selection_is_empty(self):
        """A fresh selection should have nothing selected."""
        state = create_selection_state()
        assert state.is_empty
        assert total_selected(state) == 0

    def test_toggle_selects_state(self):
        """Toggling an unselected state should select it."""
        state = toggle(create_selection_state(), "F1", "a")
        assert state.is_selected("F1", "a")
        assert state.selected("F1") == frozenset({"a"})
        assert total_selected(state) == 1

    def test_toggle_twice_removes_feature(self):
        """Toggling the last state off should drop the feature entirely."""
        state = toggle(toggle(create_selection_state(), "F1", "a"), "F1", "a")
        assert state.is_empty
        assert "F1" not in state.selections
        assert state == create_selection_state()

    def test_toggle_keeps_other_states(self):
        """Unselecting one state should keep the rest of the feature."""
        state = create_selection_state()
        state = toggle(state, "F1", "a")
        state = toggle(state, "F1", "b")
        state = toggle(state, "F1", "a")
        assert state.selected("F1") == frozenset({"b"})

    def test_toggle_does_not_mutate_input(self):
        """Toggle should return a new selection and leave the old one alone."""
        before = toggle(create_selection_state(), "F1", "a")
        after = toggle(before, "F2", "c")
        assert before.to_dict() == {"F1": ["a"]}
        assert after.to_dict() == {"F1": ["a"], "F2": ["c"]}

    def test_unknown_ids_are_accepted(self):
        """Ids that match nothing in any project should still toggle."""
        state = toggle(create_selection_state(), "nope", "nothing")
        assert state.is_selected("nope", "nothing")

    def test_total_counts_across_features(self):
        """Total should sum selected states over all features."""
        state = create_selection_state()
        for feature_id, state_id in [("F1", "a"), ("F1", "b"), ("F2", "c")]:
            state = toggle(state, feature_id, state_id)
        assert total_selected(state) == 3


class TestSelectionValue:
    """Tests for selection equality, hashing and conversion."""

    def test_reset_returns_empty(self):
        """Reset should clear everything."""
        state = toggle(create_selection_state(), "F1", "a")
        assert reset(state).is_empty
        assert state.reset().is_empty

    def test_empty_sets_are_dropped(self):
        """Constructing with an empty set should not keep the feature."""
        state = SelectionState({"F1": frozenset(), "F2": frozenset({"c"})})
        assert list(state.selections) == ["F2"]

    def test_order_of_toggles_does_not_matter(self):
        """Selections built in different orders should be equal and hash alike."""
        one = toggle(toggle(create_selection_state(), "F1", "a"), "F2", "c")
        two = toggle(toggle(create_selection_state(), "F2", "c"), "F1", "a")
        assert one == two
        assert hash(one) == hash(two)

    def test_dict_round_trip(self):
        """from_dict should rebuild the same selection from to_dict."""
        state = toggle(toggle(create_selection_state(), "F1", "b"), "F1", "a")
        assert state.to_dict() == {"F1": ["a", "b"]}
        assert SelectionState.from_dict(state.to_dict()) == state

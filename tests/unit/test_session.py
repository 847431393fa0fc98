"""Tests for identification sessions and entity details."""

from nozes.engine.session import IdentificationSession, describe_entity


class TestIdentificationSession:
    """Tests for a single player run."""

    def test_starts_with_everything_remaining(self, project):
        """A new session should show all entities."""
        session = IdentificationSession(project)
        assert [e.id for e in session.visible_entities] == ["E1", "E2", "E3"]
        assert session.status() == {
            "remaining": 3,
            "discarded": 0,
            "total_selected": 0,
            "identified": None,
        }

    def test_toggle_updates_partition(self, project):
        """Toggling should recompute the partition."""
        session = IdentificationSession(project)
        session.toggle("F1", "b")
        session.toggle("F2", "d")
        assert session.status()["identified"] == "E2"

    def test_classification_is_cached_per_selection(self, project):
        """The same selection should not be classified twice."""
        session = IdentificationSession(project)
        session.toggle("F1", "a")
        first = session.classification
        assert session.classification is first
        session.toggle("F1", "a")
        assert session.classification is not first

    def test_show_discarded(self, project):
        """Switching views should show the discarded partition."""
        session = IdentificationSession(project)
        session.toggle("F2", "c")
        session.set_show_discarded(True)
        assert [e.id for e in session.visible_entities] == ["E3"]

    def test_reset_clears_selection_and_view(self, project):
        """Reset should clear the selection and return to remaining."""
        session = IdentificationSession(project)
        session.toggle("F1", "a")
        session.set_show_discarded(True)
        session.reset()
        assert session.selection.is_empty
        assert not session.show_discarded
        assert len(session.visible_entities) == 3

    def test_describe_unknown_entity(self, project):
        """Unknown ids should give no detail."""
        assert IdentificationSession(project).describe("nope") is None


class TestDescribeEntity:
    """Tests for the entity detail view."""

    def test_lists_recorded_features_in_order(self, project):
        """Only features with recorded states should be listed."""
        detail = describe_entity(project, project.get_entity("E3"))
        assert [(t.feature_name, t.text) for t in detail.traits] == [("Color", "Red, Blue")]
        assert detail.links[0].url == "https://example.org/three"

    def test_unknown_states_show_placeholder(self, dangling_project):
        """State ids missing from the feature should show as '?'."""
        detail = describe_entity(dangling_project, dangling_project.get_entity("E2"))
        assert detail.traits[0].labels == ["Red", "?", "Blue"]

    def test_unknown_features_are_skipped(self, dangling_project):
        """Traits keyed by unknown features should not be listed."""
        detail = describe_entity(dangling_project, dangling_project.get_entity("E1"))
        assert [t.feature_id for t in detail.traits] == ["F1"]

    def test_to_dict(self, project):
        """to_dict should map feature names to labels."""
        data = describe_entity(project, project.get_entity("E2")).to_dict()
        assert data["traits"] == {"Color": ["Blue"], "Size": ["Small", "Large"]}
        assert data["links"] == []

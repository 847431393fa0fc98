"""Tests for structured (JSON) export and import."""

import json

import pytest

from nozes.exceptions import InvalidProjectError
from nozes.export.structured import (
    export_filename,
    export_structured,
    import_structured,
    load_project,
    save_project,
)
from nozes.model.project import Entity, Feature, FeatureState, Project, SubKeyReference


def minimal(**overrides):
    data = {"name": "Key", "features": [], "entities": []}
    data.update(overrides)
    return data


class TestExport:
    """Tests for exporting projects."""

    def test_round_trip_is_lossless(self, project):
        """Importing an export should give back an equal project."""
        assert import_structured(export_structured(project)) == project

    def test_round_trip_keeps_optional_fields(self):
        """Optional fields should survive export and import."""
        original = Project(
            id="hub",
            name="Hub",
            category="FLORA",
            features=[
                Feature(
                    id="f",
                    name="Leaf",
                    image_url="https://example.org/leaf.png",
                    states=[FeatureState(id="s", label="Simple", image_url="https://example.org/s.png")],
                )
            ],
            entities=[
                Entity(
                    id="e",
                    name="Oak",
                    scientific_name="Quercus robur",
                    family="Fagaceae",
                    image_url="https://example.org/oak.png",
                    traits={"f": ["s"]},
                )
            ],
            sub_keys=[SubKeyReference(id="k1", name="Trees", project_id="p-trees")],
            parent_key_id="root",
            is_sub_key=False,
        )
        assert import_structured(export_structured(original)) == original

    def test_uses_camel_case_names(self, cats):
        """Exported JSON should use the structured format field names."""
        data = json.loads(export_structured(cats))
        assert list(data) == ["id", "name", "description", "features", "entities"]
        assert data["entities"][0]["imageUrl"].startswith("https://")
        assert data["entities"][2]["traits"] == {"f1": ["s2"], "f2": ["s4", "s5"]}

    def test_unset_optionals_are_omitted(self, project):
        """Fields that were never set should not appear in the export."""
        data = json.loads(export_structured(project))
        assert "category" not in data
        assert "subKeys" not in data
        assert "imageUrl" not in data["entities"][0]

    def test_non_ascii_is_kept(self, cats):
        """Accented labels should be written as UTF-8, not escaped."""
        assert "Padrão da Pelagem".encode() in export_structured(cats)

    def test_save_and_load(self, tmp_path, project):
        """save_project and load_project should round-trip through a file."""
        path = save_project(project, tmp_path / "nested" / "key.json")
        assert path.exists()
        assert load_project(path) == project

    def test_export_filename(self, cats):
        """File names should come from the project name."""
        assert export_filename(cats, "html") == "Exemplo_Grandes_Felinos.html"
        assert export_filename(Project(id="x", name="///"), "json") == "project.json"


class TestImport:
    """Tests for import validation."""

    def test_minimal_project(self):
        """Only name, features and entities should be required."""
        project = import_structured(json.dumps(minimal()))
        assert project.name == "Key"
        assert project.id == ""
        assert project.description == ""

    def test_accepts_bom(self):
        """A UTF-8 byte order mark should be tolerated."""
        payload = b"\xef\xbb\xbf" + json.dumps(minimal()).encode()
        assert import_structured(payload).name == "Key"

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json at all",
            b"[1, 2, 3]",
            b'"just a string"',
            b"\xff\xfe\x00",
        ],
    )
    def test_rejects_non_project_payloads(self, payload):
        """Unparseable or non-object payloads should be rejected."""
        with pytest.raises(InvalidProjectError):
            import_structured(payload)

    @pytest.mark.parametrize("field", ["name", "features", "entities"])
    def test_rejects_missing_required_field(self, field):
        """Each required field must be present."""
        data = minimal()
        del data[field]
        with pytest.raises(InvalidProjectError) as exc_info:
            import_structured(json.dumps(data))
        assert field in exc_info.value.details

    def test_rejects_null_required_field(self):
        """A null required field counts as missing."""
        with pytest.raises(InvalidProjectError):
            import_structured(json.dumps(minimal(features=None)))

    def test_rejects_empty_name(self):
        """An empty project name should be rejected."""
        with pytest.raises(InvalidProjectError):
            import_structured(json.dumps(minimal(name="")))

    def test_rejects_non_list_entities(self):
        """Entities must be a list."""
        with pytest.raises(InvalidProjectError):
            import_structured(json.dumps(minimal(entities={"e1": {}})))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"features": [{"name": "No id", "states": []}]},
            {"features": [{"id": "f", "name": "F", "states": [{"id": "s"}]}]},
            {"entities": [{"id": "e", "name": "E", "traits": {"f": "s"}}]},
            {"entities": [{"id": "e", "name": "E", "traits": ["f"]}]},
            {"entities": ["not an object"]},
            {"category": "MINERAL"},
            {"isSubKey": "yes"},
            {"id": 7},
            {"entities": [{"id": "e", "name": "E", "links": [{"id": "l", "label": 5, "url": "u"}]}]},
            {"entities": [{"id": "e", "name": "E", "links": [{"id": "l", "url": "u"}]}]},
        ],
    )
    def test_rejects_malformed_nested_items(self, overrides):
        """Any malformed nested item should fail the whole import."""
        with pytest.raises(InvalidProjectError) as exc_info:
            import_structured(json.dumps(minimal(**overrides)))
        assert exc_info.value.message == "Invalid project file."
        assert exc_info.value.exit_code == 20

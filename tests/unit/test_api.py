"""Tests for the convenience API."""

import pytest

import nozes
from nozes.exceptions import UnsupportedFormatError
from nozes.export import EXPORT_FORMATS, export_project


class TestConvenienceApi:
    """Tests for top-level helpers."""

    def test_identify(self, cats):
        """identify should apply toggles in order."""
        result = nozes.identify(cats, [("f1", "s2"), ("f2", "s5")])
        assert result.identified.name == "Leopardo"

    def test_functional_selection_api(self, cats):
        """The selection helpers should compose with classify."""
        state = nozes.toggle(nozes.create_selection_state(), "f2", "s4")
        assert [e.name for e in nozes.classify(cats, state).remaining] == ["Tigre", "Leopardo"]
        assert nozes.reset(state).is_empty

    def test_open_project(self, project_file, project):
        """open_project should accept string paths."""
        assert nozes.open_project(str(project_file)) == project

    def test_export_to_file_uses_extension(self, tmp_path, cats):
        """The format should default to the file extension."""
        path = nozes.export_to_file(cats, tmp_path / "out" / "cats.HTML", language="en")
        assert path.read_bytes().startswith(b"<!DOCTYPE html>")

    def test_export_to_file_unknown_extension(self, tmp_path, cats):
        """Unknown extensions should be rejected before writing."""
        with pytest.raises(UnsupportedFormatError):
            nozes.export_to_file(cats, tmp_path / "cats.pdf")
        assert not (tmp_path / "cats.pdf").exists()


class TestExportProject:
    """Tests for format dispatch."""

    @pytest.mark.parametrize("fmt", EXPORT_FORMATS)
    def test_every_format_produces_bytes(self, fmt, project):
        """Each advertised format should export."""
        data = export_project(project, fmt, language="en")
        assert isinstance(data, bytes) and data

    def test_unknown_format(self, project):
        """Unknown formats should raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError):
            export_project(project, "docx")

"""Tests for tabular (XLSX/CSV) export."""

import csv
import io

import openpyxl
import pytest

from nozes.exceptions import UnsupportedFormatError
from nozes.export.tabular import export_csv, export_tabular, sheet_title, tabular_rows
from nozes.model.project import Project


def read_xlsx(data: bytes) -> tuple[str, list[list[str]]]:
    wb = openpyxl.load_workbook(io.BytesIO(data))
    ws = wb.active
    rows = [[value or "" for value in row] for row in ws.iter_rows(values_only=True)]
    return ws.title, rows


class TestTabularRows:
    """Tests for flattening a project into a grid."""

    def test_header_and_rows(self, project):
        """Header should list features and each row the state labels."""
        assert tabular_rows(project) == [
            ["Entity", "Color", "Size"],
            ["One", "Red", "Small"],
            ["Two", "Blue", "Small, Large"],
            ["Three", "Red, Blue", ""],
        ]

    def test_header_follows_language(self, project):
        """The first header cell should be translated."""
        assert tabular_rows(project, "pt")[0][0] == "Entidade"
        assert tabular_rows(project, "en")[0][0] == "Entity"

    def test_dangling_ids_contribute_nothing(self, dangling_project):
        """Unknown states should be dropped and unknown features ignored."""
        rows = tabular_rows(dangling_project)
        assert rows[1] == ["Ghost", "", ""]
        assert rows[2] == ["Mixed", "Red, Blue", ""]

    def test_shape(self, cats):
        """Grid should have one row per entity plus a header."""
        rows = tabular_rows(cats)
        assert len(rows) == len(cats.entities) + 1
        assert all(len(row) == len(cats.features) + 1 for row in rows)


class TestSheetTitle:
    """Tests for worksheet naming."""

    def test_uses_project_name(self, project):
        """Title should be the project name."""
        assert sheet_title(project) == "Test Key"

    def test_truncates_long_names(self):
        """Titles longer than Excel allows should be cut."""
        title = sheet_title(Project(id="x", name="A very long identification key name indeed"))
        assert len(title) <= 31

    def test_replaces_forbidden_characters(self):
        """Characters Excel rejects in sheet names should not survive."""
        title = sheet_title(Project(id="x", name="Trees/Shrubs: [north]"))
        assert not set(title) & set("[]:*?/\\")

    def test_falls_back_when_nothing_remains(self):
        """A name made only of forbidden characters should get a default title."""
        assert sheet_title(Project(id="x", name="???")) == "Matrix"


class TestExportFormats:
    """Tests for the encoded spreadsheet outputs."""

    def test_xlsx_single_sheet(self, project):
        """XLSX should hold one sheet with the same grid."""
        title, rows = read_xlsx(export_tabular(project, "en", fmt="xlsx"))
        assert title == "Test Key"
        assert rows == tabular_rows(project, "en")

    def test_xlsx_keeps_formula_like_labels_as_text(self):
        """Labels starting with '=' should be stored as plain text."""
        from nozes.model.project import Entity, Feature, FeatureState

        project = Project(
            id="x",
            name="Formulas",
            features=[Feature(id="f", name="F", states=[FeatureState(id="s", label="=1+1")])],
            entities=[Entity(id="e", name="E", traits={"f": ["s"]})],
        )
        _, rows = read_xlsx(export_tabular(project, fmt="xlsx"))
        assert rows[1] == ["E", "=1+1"]

    def test_csv(self, project):
        """CSV should contain the same grid."""
        data = export_csv(project, "pt").decode("utf-8")
        rows = list(csv.reader(io.StringIO(data)))
        assert rows == tabular_rows(project, "pt")

    def test_unknown_format(self, project):
        """Only xlsx and csv should be accepted."""
        with pytest.raises(UnsupportedFormatError):
            export_tabular(project, fmt="ods")

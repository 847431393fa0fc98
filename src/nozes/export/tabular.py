"""Tabular export: the trait matrix as a spreadsheet.

Header row is ``[Entity, <feature names>]``; one row per entity in project
order. Each cell lists the labels of the entity's states for that feature,
comma-joined. State ids that do not exist in the feature contribute nothing.
"""

from __future__ import annotations

import csv
import io
import logging
import re

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from nozes.exceptions import UnsupportedFormatError
from nozes.i18n import Language, get_strings
from nozes.model.project import Project

logger = logging.getLogger(__name__)

TABULAR_FORMATS = ("xlsx", "csv")
LABEL_SEPARATOR = ", "
MAX_SHEET_TITLE = 31  # Excel limit


def tabular_rows(project: Project, language: Language | str = Language.EN) -> list[list[str]]:
    """Flatten a project into a grid of strings.

    Args:
        project: Project to flatten.
        language: Language of the first header cell.

    Returns:
        ``len(entities) + 1`` rows of ``len(features) + 1`` cells, header first.
    """
    header = [get_strings(language)["entity"]] + [f.name for f in project.features]
    rows = [header]
    for entity in project.entities:
        row = [entity.name]
        for feature in project.features:
            state_ids = entity.traits.get(feature.id, [])
            row.append(LABEL_SEPARATOR.join(feature.state_labels(state_ids)))
        rows.append(row)
    return rows


def sheet_title(project: Project) -> str:
    """Worksheet title derived from the project name."""
    title = re.sub(r"[\[\]:*?/\\]", " ", project.name).strip()
    title = title[:MAX_SHEET_TITLE].strip()
    return title or "Matrix"


def export_xlsx(project: Project, language: Language | str = Language.EN) -> bytes:
    """Export the trait matrix as an XLSX workbook with a single sheet."""
    rows = tabular_rows(project, language)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title(project)

    header_fill = PatternFill(start_color="065F46", end_color="065F46", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")

    for row_idx, row in enumerate(rows, start=1):
        for col_idx, value in enumerate(row, start=1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            # Labels are text, never formulas
            cell.data_type = "s"
            if row_idx == 1:
                cell.font = header_font
                cell.fill = header_fill

    # Adjust column widths
    for col_idx in range(1, len(rows[0]) + 1):
        longest = max(len(row[col_idx - 1]) for row in rows)
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max(longest + 2, 12), 60)
    ws.freeze_panes = "B2"

    buffer = io.BytesIO()
    wb.save(buffer)
    logger.debug(f"Built XLSX matrix '{ws.title}' ({len(rows) - 1} rows)")
    return buffer.getvalue()


def export_csv(project: Project, language: Language | str = Language.EN) -> bytes:
    """Export the trait matrix as UTF-8 CSV."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerows(tabular_rows(project, language))
    return buffer.getvalue().encode("utf-8")


def export_tabular(
    project: Project,
    language: Language | str = Language.EN,
    fmt: str = "xlsx",
) -> bytes:
    """Export the trait matrix.

    Args:
        project: Project to export.
        language: Language of the header labels.
        fmt: ``xlsx`` or ``csv``.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not a tabular format.
    """
    if fmt == "xlsx":
        return export_xlsx(project, language)
    if fmt == "csv":
        return export_csv(project, language)
    raise UnsupportedFormatError(
        f"Unsupported tabular format: {fmt}",
        hint=f"Use one of: {', '.join(TABULAR_FORMATS)}",
    )

"""Exporters for identification keys.

Three independent, read-only transformations of a project:
1. Structured export (lossless JSON) and its import
2. Tabular export (XLSX or CSV trait matrix)
3. Standalone HTML document with an embedded player
"""

from nozes.exceptions import UnsupportedFormatError
from nozes.export.standalone import StandaloneBuilder, export_standalone
from nozes.export.structured import (
    export_filename,
    export_structured,
    import_structured,
    load_project,
    save_project,
)
from nozes.export.tabular import export_tabular, tabular_rows
from nozes.i18n import Language
from nozes.model.project import Project

EXPORT_FORMATS = ("json", "xlsx", "csv", "html")


def export_project(
    project: Project,
    fmt: str,
    language: Language | str = Language.PT,
    stylesheet_url: str | None = None,
) -> bytes:
    """Export a project in any supported format.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not one of EXPORT_FORMATS.
    """
    if fmt == "json":
        return export_structured(project)
    if fmt in ("xlsx", "csv"):
        return export_tabular(project, language, fmt=fmt)
    if fmt == "html":
        return export_standalone(project, language, stylesheet_url=stylesheet_url)
    raise UnsupportedFormatError(f"Unsupported export format: {fmt}")


__all__ = [
    "EXPORT_FORMATS",
    "export_project",
    # Structured
    "export_structured",
    "import_structured",
    "load_project",
    "save_project",
    "export_filename",
    # Tabular
    "export_tabular",
    "tabular_rows",
    # Standalone
    "StandaloneBuilder",
    "export_standalone",
]

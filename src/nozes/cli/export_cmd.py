"""Export command: write a project as JSON, XLSX, CSV or standalone HTML."""

from pathlib import Path

import typer

from nozes.cli.utils import get_console, read_project
from nozes.config.settings import get_settings
from nozes.exceptions import ExportError, UnsupportedFormatError
from nozes.export import EXPORT_FORMATS, export_project
from nozes.export.structured import export_filename
from nozes.i18n import get_language


def export(
    project_file: Path = typer.Argument(..., help="Project JSON file."),
    fmt: str = typer.Option(
        "html",
        "--format",
        "-f",
        help="Output format: json, xlsx, csv, tabular or html.",
    ),
    lang: str | None = typer.Option(
        None,
        "--lang",
        "-l",
        help="Label language (en or pt). Defaults to configured language.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file. Defaults to the project name in the export directory.",
    ),
):
    """Export a project.

    Formats:
      json     lossless structured project file
      xlsx     trait matrix spreadsheet (one sheet)
      csv      trait matrix as CSV
      tabular  xlsx or csv, as set by export.tabular_format
      html     standalone offline player

    Example:
        nozes export cats.json -f html --lang en -o cats.html
    """
    settings = get_settings()
    fmt = fmt.lower()
    if fmt == "tabular":
        fmt = settings.export.tabular_format
    if fmt not in EXPORT_FORMATS:
        raise UnsupportedFormatError(f"Unsupported export format: {fmt}")

    project = read_project(project_file)
    language = get_language(lang or settings.language)

    payload = export_project(
        project,
        fmt,
        language=language,
        stylesheet_url=settings.export.stylesheet_url,
    )

    if output is None:
        output = settings.export.directory / export_filename(project, fmt)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(payload)
    except OSError as e:
        raise ExportError(f"Could not write {output}", details=str(e))

    get_console().print(f"[green]Exported {fmt.upper()}:[/green] {output}")

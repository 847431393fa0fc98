"""Saved-project library commands."""

from pathlib import Path

import typer

from nozes.cli.utils import get_console, handle_errors, read_project
from nozes.config.settings import get_settings
from nozes.export.structured import save_project
from nozes.library import ProjectLibrary
from nozes.output import get_formatter

app = typer.Typer(
    help="Manage saved projects.",
    no_args_is_help=True,
)


def _library_option():
    return typer.Option(
        None,
        "--library",
        help="Library file. Defaults to the configured library path.",
    )


def _open_library(path: Path | None) -> ProjectLibrary:
    library = ProjectLibrary(path or get_settings().library.path)
    library.load()
    return library


@app.command("list")
@handle_errors
def list_projects(
    library_path: Path | None = _library_option(),
    json_output: bool = typer.Option(False, "--json", help="Force JSON output."),
):
    """List saved projects, most recent first."""
    library = _open_library(library_path)
    data = {
        "projects": [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "features": len(p.features),
                "entities": len(p.entities),
            }
            for p in library.projects
        ]
    }
    get_formatter(json_flag=json_output).output(data)


@app.command("add")
@handle_errors
def add(
    project_file: Path = typer.Argument(..., help="Project JSON file to save."),
    library_path: Path | None = _library_option(),
):
    """Save a project file into the library.

    Saving a project whose id is already in the library replaces it and
    moves it to the top.
    """
    project = read_project(project_file)
    library = _open_library(library_path)
    library.save(project)
    get_console().print(f"[green]Saved[/green] '{project.name}' ({project.id})")


@app.command("show")
@handle_errors
def show(
    project_id: str = typer.Argument(..., help="Saved project id."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the project JSON to this file instead of printing a summary.",
    ),
    library_path: Path | None = _library_option(),
    json_output: bool = typer.Option(False, "--json", help="Force JSON output."),
):
    """Show (or write out) a saved project."""
    project = _open_library(library_path).get(project_id)
    if output is not None:
        save_project(project, output)
        get_console().print(f"[green]Written[/green] {output}")
        return

    data = {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "features": [
            {"id": f.id, "name": f.name, "states": [s.label for s in f.states]}
            for f in project.features
        ],
        "entities": len(project.entities),
    }
    get_formatter(json_flag=json_output).output(data)


@app.command("remove")
@handle_errors
def remove(
    project_id: str = typer.Argument(..., help="Saved project id."),
    library_path: Path | None = _library_option(),
):
    """Remove a saved project."""
    project = _open_library(library_path).remove(project_id)
    get_console().print(f"[green]Removed[/green] '{project.name}' ({project.id})")

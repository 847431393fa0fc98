"""Project inspection commands: demo, info, validate."""

from pathlib import Path

import typer

from nozes.cli.utils import get_console, is_quiet, read_project
from nozes.export.structured import save_project
from nozes.model.demo import demo_project
from nozes.model.validation import validate_project
from nozes.output import get_formatter


def demo(
    output: Path = typer.Option(
        Path("demo.json"),
        "--output",
        "-o",
        help="Where to write the demo project.",
    ),
):
    """Write the bundled demo project (big cats) to a JSON file.

    Example:
        nozes demo -o cats.json
    """
    path = save_project(demo_project(), output)
    get_console().print(f"[green]Demo project written to[/green] {path}")


def info(
    project_file: Path = typer.Argument(..., help="Project JSON file."),
    json_output: bool = typer.Option(False, "--json", help="Force JSON output."),
):
    """Show a summary of a project.

    Example:
        nozes info cats.json
    """
    project = read_project(project_file)
    issues = validate_project(project)

    data = {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "features": [
            {"id": f.id, "name": f.name, "states": [s.label for s in f.states]}
            for f in project.features
        ],
        "entities": len(project.entities),
        "issue_count": len(issues),
    }
    get_formatter(json_flag=json_output, quiet=is_quiet()).output(data)


def validate(
    project_file: Path = typer.Argument(..., help="Project JSON file."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when any issue is found.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Force JSON output."),
):
    """Check a project for duplicate ids and dangling trait references.

    Dangling references never break identification (they just never match),
    but they usually point at authoring mistakes.

    Example:
        nozes validate cats.json --strict
    """
    project = read_project(project_file)
    issues = validate_project(project)

    get_formatter(json_flag=json_output, quiet=is_quiet()).output(
        {"project": project.name, "issues": [i.to_dict() for i in issues]}
    )

    if strict and issues:
        raise typer.Exit(1)

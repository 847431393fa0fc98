"""Main Typer application for Nozes CLI."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from nozes import __version__
from nozes.cli import export_cmd, identify_cmd, library_cmd, project_cmd
from nozes.cli.utils import handle_errors, set_context

# Default console for output
console = Console(stderr=True)

app = typer.Typer(
    name="nozes",
    help="""Nozes: matrix identification keys.

    [bold]Keys:[/bold]
    demo        Write the bundled demo key
    info        Show a key's features and entity count
    validate    Report duplicate ids and dangling trait references

    [bold]Identification:[/bold]
    identify    Classify entities against a selection
    play        Narrow down a key interactively

    [bold]Sharing:[/bold]
    export      Write JSON, XLSX, CSV or a standalone HTML player
    library     Manage saved projects
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"nozes version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs and full tracebacks.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress status output; still shows errors.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Completely silent (exit code only).",
    ),
):
    """Nozes: build, share and use matrix identification keys."""
    # Store flags in context for subcommands
    ctx.ensure_object(dict)
    quiet_level = 2 if silent else 1 if quiet else 0
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet_level

    # Also set global context for modules that can't access typer context
    set_context(verbose=verbose, quiet=quiet_level)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


for name, command in [
    ("demo", project_cmd.demo),
    ("info", project_cmd.info),
    ("validate", project_cmd.validate),
    ("identify", identify_cmd.identify),
    ("play", identify_cmd.play),
    ("export", export_cmd.export),
]:
    app.command(name)(handle_errors(command))

app.add_typer(library_cmd.app, name="library")


if __name__ == "__main__":
    app()

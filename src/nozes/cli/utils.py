"""Shared helpers for CLI commands: global flags, consoles, error handling."""

import functools
import io
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console

from nozes.exceptions import NozesError
from nozes.export.structured import load_project
from nozes.model.project import Project

F = TypeVar("F", bound=Callable[..., Any])

# Flags from the app callback; quiet is 0 (normal), 1 (-q) or 2 (--silent)
_context: dict[str, Any] = {"verbose": False, "quiet": 0}


def set_context(verbose: bool = False, quiet: int = 0) -> None:
    _context["verbose"] = verbose
    _context["quiet"] = quiet


def is_quiet() -> bool:
    """True for -q and --silent."""
    return _context["quiet"] >= 1


def is_silent() -> bool:
    """True for --silent (exit code only, no error messages)."""
    return _context["quiet"] >= 2


def is_verbose() -> bool:
    return bool(_context["verbose"])


def get_console() -> Console:
    """Stderr console for status messages, muted by -q."""
    if is_quiet():
        return Console(file=io.StringIO(), stderr=True)
    return Console(stderr=True)


def read_project(path: Path) -> Project:
    """Load a project file given on the command line.

    Raises:
        InvalidProjectError: If the file is not a valid project.
    """
    return load_project(Path(path))


def _report(console: Console, error: NozesError) -> None:
    console.print(f"[red]Error:[/red] {error.message}")
    if error.details:
        console.print(f"[dim]{error.details}[/dim]")
    if error.hint:
        console.print(f"[dim]Hint: {error.hint}[/dim]")


def handle_errors(func: F) -> F:
    """Turn exceptions raised by a command into messages and exit codes.

    NozesError subclasses exit with their own ``exit_code``; file system
    errors and anything unexpected exit with 1. ``--verbose`` prints the
    traceback instead of the short message, ``--silent`` prints nothing.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        err_console = Console(stderr=True)
        silent = is_silent()

        try:
            return func(*args, **kwargs)
        except NozesError as e:
            if not silent:
                if is_verbose():
                    err_console.print_exception()
                else:
                    _report(err_console, e)
            raise typer.Exit(e.exit_code)
        except FileNotFoundError as e:
            if not silent:
                err_console.print(f"[red]File not found:[/red] {e.filename or e}")
            raise typer.Exit(1)
        except OSError as e:
            if not silent:
                reason = e.strerror or type(e).__name__
                err_console.print(f"[red]{reason}:[/red] {e.filename or e}")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            if not silent:
                err_console.print("\n[yellow]Interrupted[/yellow]")
            raise typer.Exit(130)
        except (typer.Exit, typer.Abort, typer.BadParameter):
            raise
        except Exception as e:
            if not silent:
                if is_verbose():
                    err_console.print_exception()
                else:
                    err_console.print(f"[red]Unexpected error:[/red] {type(e).__name__}: {e}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]

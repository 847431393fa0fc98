"""Output formatter for CLI results.

Results go out as JSON when stdout is not a terminal (pipes, redirects,
test runners) and as Rich tables otherwise. The pretty renderer is chosen
from the keys present in the result.
"""

import io
import json
import sys
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table


@dataclass
class OutputFormatter:
    """Writes command results as JSON or Rich tables."""

    force_json: bool = False
    quiet: bool = False
    _console: Console | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._console is None:
            # Quiet mode writes into a buffer nobody reads
            self._console = Console(file=io.StringIO()) if self.quiet else Console()

    @property
    def console(self) -> Console:
        assert self._console is not None
        return self._console

    @property
    def use_json(self) -> bool:
        return self.force_json or not sys.stdout.isatty()

    def output(self, data: dict[str, Any]) -> None:
        """Write one command result."""
        if self.quiet:
            return
        if self.use_json:
            print(json.dumps(data, indent=2, ensure_ascii=False))
            return

        if "remaining" in data and "discarded" in data:
            self._output_classification(data)
        elif "issues" in data:
            self._output_issues(data)
        elif "projects" in data:
            self._output_projects(data)
        elif "features" in data and "entities" in data:
            self._output_project_info(data)
        else:
            self.console.print_json(data=data)

    def _output_classification(self, data: dict[str, Any]) -> None:
        """Output remaining/discarded partition."""
        remaining = data.get("remaining", [])
        discarded = data.get("discarded", [])
        self.console.print(
            f"\n[bold]{data.get('project', 'Project')}[/bold]  "
            f"[dim]{data.get('total_selected', 0)} state(s) selected[/dim]\n"
        )

        if len(remaining) == 1:
            self.console.print(f"[green]Identified:[/green] [bold]{remaining[0]['name']}[/bold]")
        self.console.print(f"[bold]Remaining ({len(remaining)}):[/bold]")
        if remaining:
            table = Table(show_header=True, header_style="bold")
            table.add_column("ID", style="cyan")
            table.add_column("Name")
            for entity in remaining:
                table.add_row(entity["id"], entity["name"])
            self.console.print(table)
        else:
            self.console.print("  [yellow]No matches found.[/yellow]")

        self.console.print(f"[dim]Discarded ({len(discarded)}):[/dim]")
        for entity in discarded:
            self.console.print(f"  [dim]- {entity['name']} ({entity['id']})[/dim]")

    def _output_issues(self, data: dict[str, Any]) -> None:
        """Output data-quality issues."""
        issues = data.get("issues", [])
        if not issues:
            self.console.print("[green]No data-quality issues found.[/green]")
            return

        table = Table(title=f"Issues ({len(issues)})", show_header=True, header_style="bold")
        table.add_column("Kind", style="yellow")
        table.add_column("Message")
        for issue in issues:
            table.add_row(issue["kind"], issue["message"])
        self.console.print(table)

    def _output_projects(self, data: dict[str, Any]) -> None:
        """Output saved-project list."""
        projects = data.get("projects", [])
        if not projects:
            self.console.print("[dim]No saved projects found.[/dim]")
            return

        table = Table(title="Saved Projects", show_header=True, header_style="bold")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Description", max_width=40)
        table.add_column("Features", justify="right")
        table.add_column("Entities", justify="right")
        for p in projects:
            table.add_row(
                p["id"],
                p["name"],
                p.get("description") or "-",
                str(p.get("features", 0)),
                str(p.get("entities", 0)),
            )
        self.console.print(table)

    def _output_project_info(self, data: dict[str, Any]) -> None:
        """Output project summary."""
        self.console.print(f"\n[bold]{data.get('name', 'Project')}[/bold]")
        if data.get("description"):
            self.console.print(f"[dim]{data['description']}[/dim]")
        self.console.print()

        features = data.get("features", [])
        table = Table(title=f"Features ({len(features)})", show_header=True, header_style="bold")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("States")
        for f in features:
            table.add_row(f["id"], f["name"], ", ".join(f["states"]))
        self.console.print(table)

        self.console.print(f"[bold]Entities:[/bold] {data.get('entities', 0)}")
        issue_count = data.get("issue_count", 0)
        if issue_count:
            self.console.print(
                f"[yellow]{issue_count} data-quality issue(s). "
                "Run 'nozes validate' for details.[/yellow]"
            )


def get_formatter(json_flag: bool = False, quiet: bool = False) -> OutputFormatter:
    """Get an output formatter.

    Args:
        json_flag: Force JSON output even on a terminal.
        quiet: Suppress all output.
    """
    return OutputFormatter(force_json=json_flag, quiet=quiet)

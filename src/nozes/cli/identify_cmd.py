"""Identification commands: one-shot classification and interactive play."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from nozes.cli.utils import is_quiet, read_project
from nozes.config.settings import get_settings
from nozes.engine.matching import classify
from nozes.engine.selection import SelectionState
from nozes.engine.session import IdentificationSession
from nozes.i18n import get_strings
from nozes.output import get_formatter

console = Console()


def _parse_selection(value: str) -> tuple[str, str]:
    """Parse a FEATURE:STATE pair."""
    feature_id, sep, state_id = value.partition(":")
    if not sep or not feature_id or not state_id:
        raise typer.BadParameter(f"Expected FEATURE:STATE, got '{value}'")
    return feature_id, state_id


def identify(
    project_file: Path = typer.Argument(..., help="Project JSON file."),
    select: list[str] = typer.Option(
        [],
        "--select",
        "-s",
        help="FEATURE:STATE ids to toggle, in order (repeatable).",
    ),
    json_output: bool = typer.Option(False, "--json", help="Force JSON output."),
):
    """Classify entities against a selection of feature states.

    Each --select toggles one state, so giving the same pair twice
    cancels it out. Within a feature any selected state may match; every
    feature with a selection must match.

    Example:
        nozes identify cats.json -s f1:s1 -s f2:s4
    """
    project = read_project(project_file)

    state = SelectionState()
    for value in select:
        feature_id, state_id = _parse_selection(value)
        state = state.toggle(feature_id, state_id)

    result = classify(project, state)
    data = {
        "project": project.name,
        "selection": state.to_dict(),
        "total_selected": result.total_selected,
        "remaining": [{"id": e.id, "name": e.name} for e in result.remaining],
        "discarded": [{"id": e.id, "name": e.name} for e in result.discarded],
    }
    get_formatter(json_flag=json_output, quiet=is_quiet()).output(data)


def _render(session: IdentificationSession, strings: dict[str, str]) -> None:
    """Print the features panel and the visible partition."""
    project = session.project
    result = session.classification

    console.rule(f"[bold]{project.name}[/bold]")
    for f_idx, feature in enumerate(project.features, start=1):
        selected = session.selection.selected(feature.id)
        badge = f" [green]({len(selected)})[/green]" if selected else ""
        console.print(f"[bold]{f_idx}. {feature.name}[/bold]{badge}")
        for s_idx, state in enumerate(feature.states, start=1):
            mark = "[green]x[/green]" if state.id in selected else " "
            console.print(f"   [{mark}] {f_idx}.{s_idx} {state.label}")

    label = strings["discarded"] if session.show_discarded else strings["matches"]
    table = Table(
        title=(
            f"{label} - {strings['matches']}: {len(result.remaining)}, "
            f"{strings['discarded']}: {len(result.discarded)}"
        ),
        show_header=False,
    )
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name")
    for idx, entity in enumerate(session.visible_entities, start=1):
        table.add_row(str(idx), entity.name)
    console.print(table)

    if not session.show_discarded:
        if not result.remaining:
            console.print(f"[yellow]{strings['no_matches']}[/yellow] {strings['try_unselecting']}")
        elif result.identified:
            console.print(f"[green]{strings['identified']}:[/green] {result.identified.name}")
        else:
            console.print(f"[dim]{len(result.remaining)} {strings['potential']}[/dim]")


def _show_detail(session: IdentificationSession, index: int, strings: dict[str, str]) -> None:
    entities = session.visible_entities
    if not 1 <= index <= len(entities):
        console.print(f"[red]No entity #{index}[/red]")
        return

    detail = session.describe(entities[index - 1].id)
    assert detail is not None
    console.print(f"\n[bold]{detail.name}[/bold]")
    console.print(f"[dim]{strings['species_details']}[/dim]")
    console.print(detail.description)
    if detail.links:
        console.print(f"[dim]{strings['resources']}[/dim]")
        for link in detail.links:
            console.print(f"  - {link.label or link.url}: {link.url}")
    console.print(f"[dim]{strings['morphology']}[/dim]")
    if detail.traits:
        for line in detail.traits:
            console.print(f"  {line.feature_name}: {line.text}")
    else:
        console.print(f"  [italic]{strings['no_traits']}[/italic]")
    console.print()


def _toggle_by_position(session: IdentificationSession, command: str) -> bool:
    """Toggle a state given as FEATURE_NUMBER.STATE_NUMBER."""
    f_part, _, s_part = command.partition(".")
    if not (f_part.isdigit() and s_part.isdigit()):
        return False
    features = session.project.features
    f_idx, s_idx = int(f_part), int(s_part)
    if not 1 <= f_idx <= len(features):
        return False
    states = features[f_idx - 1].states
    if not 1 <= s_idx <= len(states):
        return False
    session.toggle(features[f_idx - 1].id, states[s_idx - 1].id)
    return True


def play(
    project_file: Path = typer.Argument(..., help="Project JSON file."),
    lang: str | None = typer.Option(
        None,
        "--lang",
        "-l",
        help="Display language (en or pt). Defaults to configured language.",
    ),
):
    """Interactively narrow down a key.

    Commands at the prompt:
      F.S   toggle state S of feature F (e.g. 1.2)
      d     switch between matches and discarded
      i N   inspect entity N of the current list
      r     restart (clear all selections)
      q     quit

    Example:
        nozes play cats.json --lang en
    """
    project = read_project(project_file)
    strings = get_strings(lang or get_settings().language)
    session = IdentificationSession(project)

    while True:
        _render(session, strings)
        try:
            command = typer.prompt(">", default="", show_default=False)
        except typer.Abort:
            break

        command = command.strip().lower()
        if not command:
            continue
        if command in ("q", "quit", "exit"):
            break
        if command == "r":
            session.reset()
        elif command == "d":
            session.set_show_discarded(not session.show_discarded)
        elif command.startswith("i"):
            number = command[1:].strip()
            if number.isdigit():
                _show_detail(session, int(number), strings)
            else:
                console.print("[red]Usage: i N[/red]")
        elif not _toggle_by_position(session, command):
            console.print(f"[red]Unknown command:[/red] {command}")

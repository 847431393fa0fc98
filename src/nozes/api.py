"""Convenience API for Nozes.

This module provides simple, high-level functions for common tasks:

    >>> from nozes import create_selection_state, toggle, classify, demo_project
    >>> project = demo_project()
    >>> state = toggle(create_selection_state(), "f1", "s1")
    >>> [e.name for e in classify(project, state).remaining]
    ['Tigre']

For more control, use the underlying classes directly.
"""

from pathlib import Path
from typing import Union

from nozes.engine.matching import Classification, classify
from nozes.engine.selection import SelectionState
from nozes.export import export_project
from nozes.export.structured import load_project
from nozes.i18n import Language
from nozes.model.project import Project

PathLike = Union[Path, str]


# =============================================================================
# Identification
# =============================================================================


def identify(project: Project, selections: list[tuple[str, str]]) -> Classification:
    """Classify after toggling each (feature_id, state_id) pair in order.

    Toggling the same pair twice cancels it out.

    Example:
        >>> identify(project, [("f1", "s2"), ("f2", "s5")]).identified.name
        'Leopardo'
    """
    state = SelectionState()
    for feature_id, state_id in selections:
        state = state.toggle(feature_id, state_id)
    return classify(project, state)


# =============================================================================
# Files
# =============================================================================


def open_project(path: PathLike) -> Project:
    """Load a structured project file.

    Raises:
        InvalidProjectError: If the file is not a valid project.
    """
    return load_project(Path(path))


def export_to_file(
    project: Project,
    path: PathLike,
    fmt: str | None = None,
    language: Language | str = Language.PT,
    stylesheet_url: str | None = None,
) -> Path:
    """Export a project and write it to ``path``.

    Args:
        project: Project to export.
        path: Destination file.
        fmt: Export format. Defaults to the file extension.
        language: Language of labels in tabular and standalone exports.
        stylesheet_url: Optional stylesheet for standalone documents.

    Returns:
        Path of the written file.

    Raises:
        UnsupportedFormatError: If the format is not known.

    Example:
        >>> export_to_file(project, "cats.html", language="en")
        PosixPath('cats.html')
    """
    path = Path(path)
    fmt = fmt or path.suffix.lstrip(".").lower()
    data = export_project(project, fmt, language, stylesheet_url=stylesheet_url)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path

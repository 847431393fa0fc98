"""Structured (JSON) export and import of projects.

Export is lossless: importing the exported bytes gives back a project equal
in every field to the one exported. Import is all-or-nothing.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from nozes.exceptions import InvalidProjectError
from nozes.model.project import Project

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "features", "entities")


def project_to_json(project: Project, indent: int | None = 2) -> str:
    """Serialize a project to a JSON string."""
    return json.dumps(project.to_dict(), indent=indent, ensure_ascii=False)


def export_structured(project: Project, indent: int | None = 2) -> bytes:
    """Export a project as UTF-8 encoded JSON.

    Args:
        project: Project to export.
        indent: JSON indentation, None for compact output.

    Returns:
        Encoded JSON document.
    """
    return project_to_json(project, indent=indent).encode("utf-8")


def _check_required(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidProjectError("Top-level value must be an object")
    missing = [key for key in REQUIRED_FIELDS if key not in data or data[key] is None]
    if missing:
        raise InvalidProjectError(f"Missing required field(s): {', '.join(missing)}")
    if not data["name"]:
        raise InvalidProjectError("Project name is empty")
    for key in ("features", "entities"):
        if not isinstance(data[key], list):
            raise InvalidProjectError(f"'{key}' must be a list")
    return data


def project_from_dict(data: Any) -> Project:
    """Build a project from already-parsed data.

    Raises:
        InvalidProjectError: If required fields are missing or any nested
            item is malformed. Nothing is returned on failure.
    """
    data = _check_required(data)
    try:
        return Project.from_dict(data)
    except (ValueError, TypeError, KeyError) as e:
        raise InvalidProjectError(str(e))


def import_structured(payload: bytes | str) -> Project:
    """Parse a structured export back into a project.

    Args:
        payload: JSON document as bytes or text.

    Returns:
        The reconstructed project.

    Raises:
        InvalidProjectError: If the payload is not parseable or not a
            valid project.
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidProjectError(f"Not UTF-8 text: {e}")
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise InvalidProjectError(f"Not valid JSON: {e}")
    return project_from_dict(data)


def load_project(path: Path) -> Project:
    """Load a project from a JSON file."""
    project = import_structured(Path(path).read_bytes())
    logger.debug(
        f"Loaded project '{project.name}' from {path} "
        f"({len(project.features)} features, {len(project.entities)} entities)"
    )
    return project


def save_project(project: Project, path: Path) -> Path:
    """Write a project as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(export_structured(project))
    logger.info(f"Project saved to {path}")
    return path


def export_filename(project: Project, extension: str) -> str:
    """Default file name for an export, from the project name."""
    stem = re.sub(r"\s+", "_", project.name.strip())
    stem = re.sub(r'[<>:"/\\|?*]', "", stem) or "project"
    return f"{stem}.{extension}"

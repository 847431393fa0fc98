"""Saved-project library.

Keeps the list of saved projects in one JSON file, most recently saved
first. The list is loaded explicitly and written back on every change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from nozes.exceptions import InvalidProjectError, LibraryError, ProjectNotInLibraryError
from nozes.export.structured import project_from_dict
from nozes.model.project import Project

logger = logging.getLogger(__name__)


class ProjectLibrary:
    """File-backed list of saved projects.

    Example:
        >>> library = ProjectLibrary(Path("~/.nozes/projects.json").expanduser())
        >>> library.load()
        >>> library.save(project)
    """

    def __init__(self, path: Path):
        """Initialize the library.

        Args:
            path: JSON file holding the saved projects.
        """
        self.path = Path(path)
        self._projects: list[Project] = []

    @property
    def projects(self) -> list[Project]:
        """Saved projects, most recent first."""
        return list(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def load(self) -> list[Project]:
        """Load the saved list from disk.

        A missing file means an empty library. A corrupt file is logged and
        treated as empty; it is only overwritten on the next save.
        """
        self._projects = []
        if not self.path.exists():
            return self.projects

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load saved projects from {self.path}: {e}")
            return self.projects

        if not isinstance(data, list):
            logger.warning(f"Failed to load saved projects from {self.path}: not a list")
            return self.projects

        for item in data:
            try:
                self._projects.append(project_from_dict(item))
            except InvalidProjectError as e:
                logger.warning(f"Skipping unreadable saved project: {e.details}")
        logger.debug(f"Loaded {len(self._projects)} saved projects from {self.path}")
        return self.projects

    def get(self, project_id: str) -> Project:
        """Get a saved project by id.

        Raises:
            ProjectNotInLibraryError: If no project has that id.
        """
        for project in self._projects:
            if project.id == project_id:
                return project
        raise ProjectNotInLibraryError(f"No saved project with id '{project_id}'")

    def save(self, project: Project) -> None:
        """Save a project at the top of the list, replacing older copies."""
        self._projects = [project] + [p for p in self._projects if p.id != project.id]
        self._write()
        logger.info(f"Saved project '{project.name}' ({project.id})")

    def remove(self, project_id: str) -> Project:
        """Remove a saved project.

        Raises:
            ProjectNotInLibraryError: If no project has that id.
        """
        project = self.get(project_id)
        self._projects = [p for p in self._projects if p.id != project_id]
        self._write()
        logger.info(f"Removed project '{project.name}' ({project_id})")
        return project

    def _write(self) -> None:
        """Write the list atomically using temp file + rename."""
        data: list[dict[str, Any]] = [p.to_dict() for p in self._projects]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(".tmp")
            tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise LibraryError(f"Could not write library file {self.path}", details=str(e))

"""Standalone document export.

Builds a single HTML file that embeds the project (structured format) along
with the standalone matching engine and a minimal player, so a key can be
used offline without the authoring tool.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from nozes import __version__
from nozes.export.structured import import_structured, project_to_json
from nozes.i18n import Language, get_language, get_strings
from nozes.model.project import Project

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"

PROJECT_SCRIPT_ID = "nozes-project"
ENGINE_SCRIPT_ID = "nozes-engine"


@lru_cache
def _read_asset(name: str) -> str:
    return (ASSETS_DIR / name).read_text(encoding="utf-8")


def engine_source() -> str:
    """JavaScript source of the standalone matching engine."""
    return _read_asset("engine.js")


def player_source() -> str:
    """JavaScript source of the standalone player."""
    return _read_asset("player.js")


def script_safe_json(value: Any) -> str:
    """Serialize to JSON that can sit inside a <script> element.

    ``<``, ``>`` and ``&`` are written as unicode escapes, so the block cannot
    be closed early and parsing gives back the same value.
    """
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


class StandaloneBuilder:
    """Renders standalone HTML documents from the packaged template."""

    DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
    TEMPLATE_NAME = "standalone.html.j2"

    def __init__(
        self,
        template_dir: Path | None = None,
        stylesheet_url: str | None = None,
    ):
        """Initialize the builder.

        Args:
            template_dir: Custom template directory.
            stylesheet_url: Optional stylesheet linked from the document.
                Filtering never depends on it being reachable.
        """
        self.template_dir = template_dir or self.DEFAULT_TEMPLATE_DIR
        self.stylesheet_url = stylesheet_url
        self._env: Environment | None = None

    def _get_env(self) -> Environment:
        """Get or create Jinja2 environment."""
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader(str(self.template_dir)),
                autoescape=select_autoescape(["html", "xml", "j2"]),
            )
        return self._env

    def build(self, project: Project, language: Language | str = Language.PT) -> str:
        """Render the standalone document.

        Args:
            project: Project to embed.
            language: Language of the player labels.

        Returns:
            Complete HTML document.
        """
        language = get_language(language)
        strings = get_strings(language)
        template = self._get_env().get_template(self.TEMPLATE_NAME)

        rendered = template.render(
            language=language.value,
            version=__version__,
            project=project,
            strings=strings,
            stylesheet_url=self.stylesheet_url,
            project_json=script_safe_json(project_to_json(project, indent=None)),
            strings_json=script_safe_json(strings),
            engine_js=engine_source(),
            player_js=player_source(),
        )
        logger.debug(
            f"Rendered standalone document for '{project.name}' "
            f"({len(project.entities)} entities, {language.value})"
        )
        return rendered


def export_standalone(
    project: Project,
    language: Language | str = Language.PT,
    stylesheet_url: str | None = None,
) -> bytes:
    """Export a project as a self-contained HTML document.

    Args:
        project: Project to export.
        language: Language of the player labels.
        stylesheet_url: Optional stylesheet linked from the document.

    Returns:
        UTF-8 encoded HTML.
    """
    builder = StandaloneBuilder(stylesheet_url=stylesheet_url)
    return builder.build(project, language).encode("utf-8")


def extract_script(document: str, script_id: str) -> str:
    """Get the text of a ``<script id=...>`` block from a rendered document."""
    start_marker = f'id="{script_id}">'
    start = document.index(start_marker) + len(start_marker)
    end = document.index("</script>", start)
    return document[start:end]


def extract_embedded_project(document: str) -> Project:
    """Read the project embedded in a standalone document."""
    return import_structured(extract_script(document, PROJECT_SCRIPT_ID))

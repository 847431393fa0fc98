"""Nozes: matrix identification keys.

This module provides a Python API for:
- Describing keys as features, states and entities with observed traits
- Narrowing candidates by toggling feature states (OR within a feature,
  AND across features)
- Exporting keys as lossless JSON, XLSX/CSV trait matrices, or a single
  standalone HTML player that works offline

Simple API (recommended for most users):
    >>> from nozes import open_project, identify
    >>>
    >>> project = open_project("cats.json")
    >>> result = identify(project, [("f1", "s1")])
    >>> [e.name for e in result.remaining]

Advanced usage (for more control):
    >>> from nozes import IdentificationSession, export_standalone
    >>>
    >>> session = IdentificationSession(project)
    >>> session.toggle("f2", "s4")
    >>> html = export_standalone(project, language="en")
"""

__version__ = "2.1.0"

# Convenience API
from nozes.api import export_to_file, identify, open_project

# Configuration
from nozes.config.settings import Settings, get_settings

# Engine
from nozes.engine.matching import Classification, classify, entity_matches
from nozes.engine.selection import SelectionState, create_selection_state, reset, toggle
from nozes.engine.session import EntityDetail, IdentificationSession
from nozes.exceptions import (
    ConfigError,
    ExportError,
    InvalidProjectError,
    LibraryError,
    NozesError,
    ProjectNotInLibraryError,
    UnsupportedFormatError,
)

# Exporters
from nozes.export import export_project
from nozes.export.standalone import export_standalone
from nozes.export.structured import export_structured, import_structured
from nozes.export.tabular import export_tabular
from nozes.i18n import Language

# Library
from nozes.library.store import ProjectLibrary

# Model
from nozes.model import (
    Entity,
    ExternalLink,
    Feature,
    FeatureState,
    Project,
    demo_project,
    validate_project,
)

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "NozesError",
    "InvalidProjectError",
    "ExportError",
    "UnsupportedFormatError",
    "ConfigError",
    "LibraryError",
    "ProjectNotInLibraryError",
    # Model
    "Project",
    "Feature",
    "FeatureState",
    "Entity",
    "ExternalLink",
    "validate_project",
    "demo_project",
    # Engine
    "SelectionState",
    "create_selection_state",
    "toggle",
    "reset",
    "entity_matches",
    "Classification",
    "IdentificationSession",
    "EntityDetail",
    # Exporters
    "Language",
    "export_project",
    "export_structured",
    "import_structured",
    "export_tabular",
    "export_standalone",
    # Library
    "ProjectLibrary",
    # Configuration
    "Settings",
    "get_settings",
    # Convenience API
    "classify",
    "identify",
    "open_project",
    "export_to_file",
]

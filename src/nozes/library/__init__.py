"""Saved-project library."""

from nozes.library.store import ProjectLibrary

__all__ = ["ProjectLibrary"]

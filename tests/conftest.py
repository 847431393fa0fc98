"""Pytest fixtures for Nozes tests."""

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from nozes.config.settings import get_settings
from nozes.export.structured import save_project
from nozes.model.demo import demo_project
from nozes.model.project import Entity, ExternalLink, Feature, FeatureState, Project


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.nozes and NOZES_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in list(os.environ):
        if name.startswith("NOZES_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture
def project() -> Project:
    """Two features, three entities.

    F1 has states a and b, F2 has c and d. E3 records nothing for F2.
    """
    return Project(
        id="p1",
        name="Test Key",
        description="Small key for tests.",
        features=[
            Feature(
                id="F1",
                name="Color",
                states=[FeatureState(id="a", label="Red"), FeatureState(id="b", label="Blue")],
            ),
            Feature(
                id="F2",
                name="Size",
                states=[FeatureState(id="c", label="Small"), FeatureState(id="d", label="Large")],
            ),
        ],
        entities=[
            Entity(id="E1", name="One", traits={"F1": ["a"], "F2": ["c"]}),
            Entity(id="E2", name="Two", traits={"F1": ["b"], "F2": ["c", "d"]}),
            Entity(
                id="E3",
                name="Three",
                description="Has no size recorded.",
                links=[ExternalLink(id="l1", label="Wiki", url="https://example.org/three")],
                traits={"F1": ["a", "b"]},
            ),
        ],
    )


@pytest.fixture
def dangling_project(project) -> Project:
    """Project whose entities reference states and features that do not exist."""
    return Project(
        id="p2",
        name="Dangling",
        features=project.features,
        entities=[
            Entity(id="E1", name="Ghost", traits={"F1": ["zzz"], "F9": ["a"]}),
            Entity(id="E2", name="Mixed", traits={"F1": ["a", "zzz", "b"]}),
        ],
    )


@pytest.fixture
def cats() -> Project:
    """Bundled demo project."""
    return demo_project()


@pytest.fixture
def project_file(tmp_path, project) -> Path:
    """Project written as a structured JSON file."""
    return save_project(project, tmp_path / "project.json")


@pytest.fixture
def cats_file(tmp_path, cats) -> Path:
    """Demo project written as a structured JSON file."""
    return save_project(cats, tmp_path / "cats.json")


@pytest.fixture
def write_json(tmp_path):
    """Write arbitrary JSON data to a file and return its path."""

    def _write(data, name="data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write

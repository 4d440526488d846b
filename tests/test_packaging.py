"""Tests for pyproject.toml metadata."""

import tomllib
from pathlib import Path

import sample_app

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestProjectMetadata:
    def test_python_floor_matches_kida(self) -> None:
        project = tomllib.loads(PYPROJECT.read_text())["project"]
        assert project["requires-python"] == ">=3.14"

    def test_version_matches_package(self) -> None:
        project = tomllib.loads(PYPROJECT.read_text())["project"]
        assert project["version"] == sample_app.__version__

    def test_console_script(self) -> None:
        scripts = tomllib.loads(PYPROJECT.read_text())["project"]["scripts"]
        assert scripts["sample-app"] == "sample_app.cli:main"

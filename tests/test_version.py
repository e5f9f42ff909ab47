"""Package version must match pyproject.toml."""

import tomllib
from pathlib import Path

import mock_launcher

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_module_version_matches_project_version() -> None:
    pyproject = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    project_version = pyproject.get("project", {}).get("version")

    assert isinstance(project_version, str) and project_version
    assert mock_launcher.__version__ == project_version

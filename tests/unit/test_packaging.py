"""Tests for the project metadata in pyproject.toml."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def load_project():
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]


class TestProjectMetadata:
    """Test the metadata shipped with the distribution."""

    def test_readme_is_not_a_requirements_document(self):
        readme = load_project().get("readme")

        assert readme not in ("SPEC_FULL.md", "DESIGN.md", "spec.md")
        if readme is not None:
            assert (ROOT / readme).is_file()

    def test_runtime_dependencies_declared(self):
        names = {
            dep.split(">")[0].split("=")[0].strip()
            for dep in load_project()["dependencies"]
        }

        assert {"sqlalchemy", "sqlmodel", "pydantic", "pydantic-settings"} <= names

"""
Repository setup tests.

These tests verify the project structure and packaging metadata.
"""

import tomllib
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent
PACKAGE_DIR = PROJECT_ROOT / "typesense_client"


class TestProjectStructure:
    """Verify project directory structure exists."""

    def test_package_directory_exists(self):
        """typesense_client/ must exist and be a package."""
        assert PACKAGE_DIR.is_dir(), f"typesense_client/ directory missing at {PACKAGE_DIR}"
        assert (PACKAGE_DIR / "__init__.py").exists(), "typesense_client/__init__.py missing"

    def test_layer_packages_exist(self):
        """core/, models/, http/ and clients/ are packages."""
        for name in ("core", "models", "http", "clients"):
            package = PACKAGE_DIR / name
            assert (package / "__init__.py").exists(), f"{package} must be a package"

    def test_tests_directory_exists(self):
        """tests/ directory must exist for test code."""
        tests_dir = PROJECT_ROOT / "tests"
        assert tests_dir.is_dir(), f"tests/ directory missing at {tests_dir}"


class TestPyprojectToml:
    """Verify pyproject.toml exists and is valid."""

    def _load(self) -> dict:
        with (PROJECT_ROOT / "pyproject.toml").open("rb") as f:
            return tomllib.load(f)

    def test_pyproject_has_project_name(self):
        """pyproject.toml must define the project name."""
        assert self._load()["project"]["name"] == "typesense-client"

    def test_pyproject_has_python_version(self):
        """pyproject.toml must require Python 3.11+."""
        assert "3.11" in self._load()["project"]["requires-python"]

    def test_runtime_dependencies(self):
        """httpx, pydantic, pydantic-settings and structlog are declared."""
        dependencies = " ".join(self._load()["project"]["dependencies"]).lower()

        for name in ("httpx", "pydantic", "pydantic-settings", "structlog"):
            assert name in dependencies, f"{name} must be a declared dependency"

    def test_pytest_in_test_extra(self):
        """pytest is a test-only dependency."""
        extras = self._load()["project"]["optional-dependencies"]["test"]

        assert any(req.startswith("pytest") for req in extras)

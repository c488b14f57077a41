"""
Tests for the packaging configuration.

Some subpackages ship without ``__init__.py``; package discovery must
pick them up as namespace packages.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


class TestPackageDiscovery:
    """Tests for [tool.setuptools.packages.find]."""

    def test_namespace_packages_are_discovered(self) -> None:
        config = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
        find = config["tool"]["setuptools"]["packages"]["find"]
        assert find["namespaces"] is True
        assert "app*" in find["include"]

    @pytest.mark.parametrize(
        "package", ["app/core", "app/shared/security", "app/interfaces/error_codes"]
    )
    def test_namespace_directories_hold_modules(self, package: str) -> None:
        assert list((ROOT / package).glob("*.py"))

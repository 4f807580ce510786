"""Shared pytest fixtures for the neura-bootstrap test suite.

Provides reusable fixtures for:
- A temporary repository root with shared schema files
- Sample service records and registry files
- A config rooted at the temporary repository
- Patched tool lookup so prerequisite checks pass or fail on demand
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import yaml

from neura_bootstrap.config import BootstrapConfig
from neura_bootstrap.registry.models import ServiceRecord


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

FOO_SERVICE: dict[str, Any] = {
    "name": "foo",
    "path": "services/foo",
    "language": "go",
    "port": 8080,
    "namespace": "core",
    "team": "x",
}

BAR_SERVICE: dict[str, Any] = {
    "name": "bar",
    "path": "services/ai/bar",
    "language": "python",
    "port": 9000,
    "namespace": "ai",
    "team": "ml-platform",
}


def write_registry(root: Path, services: list[dict[str, Any]], name: str = "service-registry.yaml") -> Path:
    """Write a registry YAML file under *root* and return its path."""
    path = root / name
    path.write_text(yaml.safe_dump({"services": services}, sort_keys=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Temporary repository root containing the shared schema files."""
    root = tmp_path / "neura"
    placeholders = root / "core" / "schema" / "placeholders"
    placeholders.mkdir(parents=True)
    (root / "core" / "schema" / "global_schema.json").write_text(
        json.dumps({"version": 1, "types": {}}), encoding="utf-8"
    )
    (placeholders / "en.json").write_text(
        json.dumps({"greeting": "Hello"}), encoding="utf-8"
    )
    return root


@pytest.fixture
def config(repo_root: Path) -> BootstrapConfig:
    """A default config rooted at the temporary repository."""
    return BootstrapConfig(root_dir=repo_root)


# ---------------------------------------------------------------------------
# Records & registries
# ---------------------------------------------------------------------------


@pytest.fixture
def foo_record() -> ServiceRecord:
    return ServiceRecord(**FOO_SERVICE)


@pytest.fixture
def bar_record() -> ServiceRecord:
    return ServiceRecord(**BAR_SERVICE)


@pytest.fixture
def registry_file(repo_root: Path) -> Path:
    """A registry with the two sample services."""
    return write_registry(repo_root, [FOO_SERVICE, BAR_SERVICE])


# ---------------------------------------------------------------------------
# Tool lookup
# ---------------------------------------------------------------------------


@pytest.fixture
def tools_installed():
    """Pretend every external tool is on PATH."""
    with patch(
        "neura_bootstrap.prerequisites.shutil.which",
        side_effect=lambda tool: f"/usr/bin/{tool}",
    ) as mock_which:
        yield mock_which


@pytest.fixture
def no_tools_installed():
    """Pretend no external tool is on PATH."""
    with patch("neura_bootstrap.prerequisites.shutil.which", return_value=None) as mock_which:
        yield mock_which


@pytest.fixture
def foo_service() -> dict[str, Any]:
    """Raw registry entry for the ``foo`` sample service."""
    return dict(FOO_SERVICE)


@pytest.fixture
def bar_service() -> dict[str, Any]:
    """Raw registry entry for the ``bar`` sample service."""
    return dict(BAR_SERVICE)


@pytest.fixture
def make_registry():
    """Factory fixture: ``make_registry(root, services)`` writes a registry file."""
    return write_registry

"""Copy the shared schema files into every ``api`` directory.

The sync walks the filesystem rather than the registry, so an ``api``
directory that belongs to no registered service is updated too.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from neura_bootstrap.errors import SchemaSyncError
from neura_bootstrap.utils import print_warning

API_DIR_NAME = "api"


def find_api_dirs(services_root: Path) -> list[Path]:
    """Return every directory named ``api`` under *services_root*, sorted."""
    if not services_root.is_dir():
        return []
    return sorted(p for p in services_root.rglob(API_DIR_NAME) if p.is_dir())


def sync_shared_schema(services_root: Path, files: Iterable[Path]) -> list[Path]:
    """Copy each of *files* into every API directory under *services_root*.

    Returns:
        The API directories that received the files.

    Raises:
        SchemaSyncError: If a shared file is missing when it is first copied.
    """
    if not services_root.is_dir():
        print_warning(f"  Services root {services_root} does not exist; nothing to sync")
        return []

    api_dirs = find_api_dirs(services_root)
    for source in files:
        for api_dir in api_dirs:
            if not source.is_file():
                raise SchemaSyncError(f"Shared schema file not found: {source}")
            shutil.copy(source, api_dir)
    return api_dirs

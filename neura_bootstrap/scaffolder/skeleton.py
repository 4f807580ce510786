"""Fixed per-service directory skeleton."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from neura_bootstrap.config import WritePolicy
from neura_bootstrap.registry.models import ServiceRecord

from .writer import ArtifactWriter, WriteOutcome

SKELETON_DIRS: tuple[str, ...] = (
    "cmd",
    "internal/handlers",
    "internal/repository",
    "internal/service",
    "internal/models",
    "api",
    "tests/unit",
    "tests/integration",
)


@dataclass
class SkeletonResult:
    service_dir: Path
    readme: Path
    readme_outcome: WriteOutcome
    directories: list[Path] = field(default_factory=list)


def create_skeleton(
    root_dir: Path,
    record: ServiceRecord,
    writer: ArtifactWriter | None = None,
    readme_policy: WritePolicy = WritePolicy.PRESERVE,
) -> SkeletonResult:
    """Create ``<root_dir>/<record.path>`` with every skeleton directory.

    Existing directories are left alone. An empty ``README.md`` is created
    when missing; with the default policy an existing one is never touched.
    """
    writer = writer or ArtifactWriter()
    service_dir = root_dir / record.path

    directories: list[Path] = []
    for rel in SKELETON_DIRS:
        directory = service_dir / rel
        directory.mkdir(parents=True, exist_ok=True)
        directories.append(directory)

    readme = service_dir / "README.md"
    outcome = writer.write(readme, "", readme_policy)
    return SkeletonResult(
        service_dir=service_dir,
        readme=readme,
        readme_outcome=outcome,
        directories=directories,
    )

"""Write rendered artifacts to disk according to their write policy."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from neura_bootstrap.config import WritePolicy


class WriteOutcome(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


class ArtifactWriter:
    """Thin adapter between in-memory rendering and the filesystem.

    ``OVERWRITE`` replaces any existing file. ``PRESERVE`` writes only when
    the target is absent and otherwise leaves it byte-for-byte untouched.
    Outcomes are recorded so the run can report what it did.
    """

    def __init__(self) -> None:
        self.written: list[Path] = []
        self.skipped: list[Path] = []

    def write(self, path: Path, content: str, policy: WritePolicy) -> WriteOutcome:
        if policy is WritePolicy.PRESERVE and path.exists():
            self.skipped.append(path)
            return WriteOutcome.SKIPPED

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.written.append(path)
        return WriteOutcome.WRITTEN

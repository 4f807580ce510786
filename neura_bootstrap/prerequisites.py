"""External tool probe run before anything is written."""

from __future__ import annotations

import shutil
from collections.abc import Iterable

from neura_bootstrap.config import REQUIRED_TOOLS
from neura_bootstrap.errors import MissingPrerequisiteError


def find_missing_tools(tools: Iterable[str] = REQUIRED_TOOLS) -> list[str]:
    """Return the tools from *tools* that are not on ``PATH``, in order.

    Presence only; versions are not checked.
    """
    return [tool for tool in tools if shutil.which(tool) is None]


def check_prerequisites(tools: Iterable[str] = REQUIRED_TOOLS) -> None:
    """Raise ``MissingPrerequisiteError`` unless every tool is installed."""
    missing = find_missing_tools(tools)
    if missing:
        raise MissingPrerequisiteError(missing)

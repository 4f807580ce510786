"""Exception hierarchy for the bootstrap pipeline."""

from __future__ import annotations


class BootstrapError(Exception):
    """Base class for every failure that aborts a bootstrap run."""


class MissingPrerequisiteError(BootstrapError):
    """Raised when a required external tool is not on ``PATH``."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        tool = self.missing[0] if self.missing else "?"
        message = f"{tool} not installed"
        if len(self.missing) > 1:
            message += f" (also missing: {', '.join(self.missing[1:])})"
        super().__init__(message)


class RegistryError(BootstrapError):
    """Raised when the service registry cannot be read or validated."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid service registry {path}: {reason}")


class SchemaSyncError(BootstrapError):
    """Raised when a shared schema file cannot be copied into an API directory."""

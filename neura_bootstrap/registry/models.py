"""Pydantic v2 models for the service registry.

A registry is a flat, ordered list of service records. Records are validated
when the registry is loaded so that a missing field is reported up front
instead of leaking into a generated file as an empty string.
"""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ServiceRecord(BaseModel):
    """One service entry in ``service-registry.yaml``.

    ``name`` becomes a file name and ``path`` a directory under the repository
    root, so both are restricted to values that stay inside their folders.
    YAML scalars such as ``team: 42`` are taken as text.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    name: str = Field(
        ...,
        pattern=r"^[A-Za-z0-9][A-Za-z0-9._-]*$",
        description="Unique service name, used in file names",
    )
    path: str = Field(..., min_length=1, description="Service directory relative to the root")
    language: str = Field(..., min_length=1, description="Base image name, e.g. 'go' or 'python'")
    port: int = Field(..., ge=1, le=65535, description="Container port exposed by the service")
    namespace: str = Field(..., min_length=1, description="Kubernetes namespace to deploy into")
    team: str = Field(..., description="Owning team, may be empty")

    @field_validator("path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).anchor:
            raise ValueError("must be relative to the repository root")
        parts = value.replace("\\", "/").split("/")
        if ".." in parts:
            raise ValueError("must not contain '..'")
        return value.rstrip("/")


class ServiceRegistry(BaseModel):
    """The parsed registry: records in file order."""

    services: list[ServiceRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> "ServiceRegistry":
        seen: set[str] = set()
        duplicates: list[str] = []
        for record in self.services:
            if record.name in seen and record.name not in duplicates:
                duplicates.append(record.name)
            seen.add(record.name)
        if duplicates:
            raise ValueError(f"duplicate service names: {', '.join(duplicates)}")
        return self

    def names(self) -> list[str]:
        """Return service names in registry order."""
        return [record.name for record in self.services]

    def get(self, name: str) -> ServiceRecord | None:
        """Return the record called *name*, or ``None``."""
        for record in self.services:
            if record.name == name:
                return record
        return None

    def __len__(self) -> int:
        return len(self.services)

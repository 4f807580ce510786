"""Read ``service-registry.yaml`` into a validated ``ServiceRegistry``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from neura_bootstrap.errors import RegistryError
from neura_bootstrap.registry.models import ServiceRegistry


def load_registry(path: str | Path) -> ServiceRegistry:
    """Load and validate the registry at *path*.

    An empty document, or one without a ``services`` key, gives an empty
    registry.

    Raises:
        RegistryError: If the file is missing, is not UTF-8 or valid YAML, has the
            wrong shape, or contains an invalid record.
    """
    registry_path = Path(path)
    if not registry_path.is_file():
        raise RegistryError(registry_path, "file not found")

    try:
        data = yaml.safe_load(registry_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise RegistryError(registry_path, f"not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise RegistryError(registry_path, f"invalid YAML: {exc}") from exc

    if data is None:
        return ServiceRegistry()
    if not isinstance(data, dict):
        raise RegistryError(registry_path, "top level must be a mapping")

    services = data.get("services")
    if services is None:
        return ServiceRegistry()
    if not isinstance(services, list):
        raise RegistryError(registry_path, "'services' must be a list")

    try:
        return ServiceRegistry.model_validate({"services": services})
    except ValidationError as exc:
        raise RegistryError(registry_path, _describe(exc, services)) from exc


def _describe(exc: ValidationError, services: list[Any]) -> str:
    """Render validation errors as ``services[i] (name): field: message`` lines."""
    lines: list[str] = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if len(loc) >= 2 and loc[0] == "services" and isinstance(loc[1], int):
            index = loc[1]
            entry = services[index] if index < len(services) else None
            name = entry.get("name") if isinstance(entry, dict) else None
            label = f"services[{index}]" + (f" ({name})" if name else "")
            field = ".".join(str(part) for part in loc[2:]) or "record"
            lines.append(f"{label}: {field}: {error['msg']}")
        else:
            lines.append(str(error["msg"]))
    return "; ".join(lines)

"""Neura bootstrap configuration.

Centralised, typed configuration for the bootstrap run. All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or environment variables without boiler-plate.

The per-artifact write policy table also lives here: which generated files are
regenerated on every run and which are only written once.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    """Every kind of file the bootstrap run can emit."""

    DOCKERFILE = "dockerfile"
    HELM_CHART = "helm_chart"
    HELM_VALUES = "helm_values"
    ARGOCD_APPLICATION = "argocd_application"
    CI_WORKFLOW = "ci_workflow"
    README = "readme"
    DASHBOARD = "dashboard"


class WritePolicy(str, Enum):
    """What to do when the target file already exists."""

    OVERWRITE = "overwrite"
    PRESERVE = "preserve"


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

REQUIRED_TOOLS: tuple[str, ...] = ("envsubst", "kubectl", "helm")

DEFAULT_DASHBOARD_NAMESPACES: tuple[str, ...] = (
    "core",
    "ai",
    "ads",
    "mod",
    "localization",
    "infra",
    "analytics",
    "gamification",
    "public-voice",
    "dev",
    "data",
    "bonus",
)

# The registry is the source of truth for everything except the README and the
# CI workflow, which are scaffolded once and then owned by the service team.
DEFAULT_WRITE_POLICIES: dict[ArtifactKind, WritePolicy] = {
    ArtifactKind.DOCKERFILE: WritePolicy.OVERWRITE,
    ArtifactKind.HELM_CHART: WritePolicy.OVERWRITE,
    ArtifactKind.HELM_VALUES: WritePolicy.OVERWRITE,
    ArtifactKind.ARGOCD_APPLICATION: WritePolicy.OVERWRITE,
    ArtifactKind.CI_WORKFLOW: WritePolicy.PRESERVE,
    ArtifactKind.README: WritePolicy.PRESERVE,
    ArtifactKind.DASHBOARD: WritePolicy.OVERWRITE,
}


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------


class HelmConfig(BaseModel):
    """Values baked into every generated Helm chart."""

    chart_version: str = Field(default="0.1.0")
    replica_count: int = Field(default=2, ge=1)
    image_prefix: str = Field(default="neura", description="Image repository namespace")
    image_tag: str = Field(default="latest")
    cpu_limit: str = Field(default="500m")
    memory_limit: str = Field(default="512Mi")


class ArgoConfig(BaseModel):
    """Settings for generated ArgoCD ``Application`` manifests."""

    project: str = Field(default="neura")
    namespace: str = Field(default="argocd", description="Namespace the Application lives in")
    repo_url: str = Field(default="https://github.com/neura/social")
    target_revision: str = Field(default="main")
    server: str = Field(default="https://kubernetes.default.svc")
    prune: bool = Field(default=True)
    self_heal: bool = Field(default=True)


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


class BootstrapConfig(BaseModel):
    """Global bootstrap configuration.

    Holds every tuneable parameter and derived path used by the run.
    Instances are created once by the CLI entry point and passed to
    ``Bootstrapper``.
    """

    root_dir: Path = Field(default=Path("."))
    registry_file: str = Field(default="service-registry.yaml")
    required_tools: list[str] = Field(default_factory=lambda: list(REQUIRED_TOOLS))
    dashboard_namespaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DASHBOARD_NAMESPACES)
    )
    helm: HelmConfig = Field(default_factory=HelmConfig)
    argo: ArgoConfig = Field(default_factory=ArgoConfig)
    write_policies: dict[ArtifactKind, WritePolicy] = Field(
        default_factory=lambda: dict(DEFAULT_WRITE_POLICIES)
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def registry_path(self) -> Path:
        """Path to the service registry YAML file."""
        return self.root_dir / self.registry_file

    @property
    def services_root(self) -> Path:
        """Directory scanned for ``api`` folders during schema sync."""
        return self.root_dir / "services"

    @property
    def helm_charts_dir(self) -> Path:
        return self.root_dir / "infrastructure" / "helm" / "charts"

    @property
    def argo_apps_dir(self) -> Path:
        return self.root_dir / "infrastructure" / "argo" / "applications"

    @property
    def workflows_dir(self) -> Path:
        return self.root_dir / ".github" / "workflows"

    @property
    def dashboards_dir(self) -> Path:
        return self.root_dir / "infrastructure" / "monitoring" / "grafana" / "dashboards"

    @property
    def global_schema_path(self) -> Path:
        return self.root_dir / "core" / "schema" / "global_schema.json"

    @property
    def placeholders_path(self) -> Path:
        """The English localization placeholder file."""
        return self.root_dir / "core" / "schema" / "placeholders" / "en.json"

    @property
    def shared_schema_files(self) -> list[Path]:
        """Files copied into every API directory, in copy order."""
        return [self.global_schema_path, self.placeholders_path]

    def policy_for(self, kind: ArtifactKind) -> WritePolicy:
        """Return the write policy for *kind* (overwrite when unlisted)."""
        return self.write_policies.get(kind, WritePolicy.OVERWRITE)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "BootstrapConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "BootstrapConfig":
        """Build a ``BootstrapConfig`` from environment variables.

        Recognised variables (all optional):
            NEURA_ROOT_DIR, NEURA_REGISTRY, NEURA_IMAGE_PREFIX,
            NEURA_ARGO_REPO_URL, NEURA_ARGO_REVISION,
            NEURA_DASHBOARD_NAMESPACES.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEURA_ROOT_DIR"):
            kwargs["root_dir"] = Path(os.environ["NEURA_ROOT_DIR"])
        if os.environ.get("NEURA_REGISTRY"):
            kwargs["registry_file"] = os.environ["NEURA_REGISTRY"]
        if os.environ.get("NEURA_DASHBOARD_NAMESPACES"):
            raw = os.environ["NEURA_DASHBOARD_NAMESPACES"]
            kwargs["dashboard_namespaces"] = [ns.strip() for ns in raw.split(",") if ns.strip()]

        helm_kwargs: dict[str, Any] = {}
        if os.environ.get("NEURA_IMAGE_PREFIX"):
            helm_kwargs["image_prefix"] = os.environ["NEURA_IMAGE_PREFIX"]

        argo_kwargs: dict[str, Any] = {}
        if os.environ.get("NEURA_ARGO_REPO_URL"):
            argo_kwargs["repo_url"] = os.environ["NEURA_ARGO_REPO_URL"]
        if os.environ.get("NEURA_ARGO_REVISION"):
            argo_kwargs["target_revision"] = os.environ["NEURA_ARGO_REVISION"]

        return cls(
            helm=HelmConfig(**helm_kwargs),
            argo=ArgoConfig(**argo_kwargs),
            **kwargs,
        )

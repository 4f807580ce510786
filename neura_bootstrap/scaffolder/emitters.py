"""Per-service artifact emitters.

Each emitter turns one ``ServiceRecord`` into the text of one file and knows
where that file lives. Emitters never touch the filesystem, so they can be
exercised entirely in memory; ``ArtifactWriter`` performs the write.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from neura_bootstrap.config import ArtifactKind, BootstrapConfig
from neura_bootstrap.registry.models import ServiceRecord

from .templates import TemplateRenderer


class Emitter:
    """Renders one artifact kind from a service record.

    Subclasses set ``kind`` and ``template`` and implement :meth:`target`.
    """

    kind: ArtifactKind
    template: str

    def __init__(self, renderer: TemplateRenderer, config: BootstrapConfig) -> None:
        self.renderer = renderer
        self.config = config

    def target(self, record: ServiceRecord) -> Path:
        """Return the absolute path of the file emitted for *record*."""
        raise NotImplementedError

    def context(self, record: ServiceRecord) -> dict[str, Any]:
        """Build the template context: the record fields plus config sections."""
        return {
            **record.model_dump(),
            "helm": self.config.helm,
            "argo": self.config.argo,
        }

    def render(self, record: ServiceRecord) -> str:
        return self.renderer.render(self.template, self.context(record))


class DockerfileEmitter(Emitter):
    kind = ArtifactKind.DOCKERFILE
    template = "Dockerfile.j2"

    def target(self, record: ServiceRecord) -> Path:
        return self.config.root_dir / record.path / "Dockerfile"


class HelmChartEmitter(Emitter):
    kind = ArtifactKind.HELM_CHART
    template = "helm/Chart.yaml.j2"

    def target(self, record: ServiceRecord) -> Path:
        return self.config.helm_charts_dir / record.name / "Chart.yaml"


class HelmValuesEmitter(Emitter):
    kind = ArtifactKind.HELM_VALUES
    template = "helm/values.yaml.j2"

    def target(self, record: ServiceRecord) -> Path:
        return self.config.helm_charts_dir / record.name / "values.yaml"


class ArgoApplicationEmitter(Emitter):
    """ArgoCD ``Application`` pointing at the service's Helm chart."""

    kind = ArtifactKind.ARGOCD_APPLICATION
    template = "argo/application.yaml.j2"

    def target(self, record: ServiceRecord) -> Path:
        return self.config.argo_apps_dir / f"{record.name}.yaml"

    def context(self, record: ServiceRecord) -> dict[str, Any]:
        # The chart path is relative to the repository ArgoCD watches.
        return {
            **super().context(record),
            "chart_path": f"infrastructure/helm/charts/{record.name}",
        }


class CIWorkflowEmitter(Emitter):
    kind = ArtifactKind.CI_WORKFLOW
    template = "workflows/ci.yml.j2"

    def target(self, record: ServiceRecord) -> Path:
        return self.config.workflows_dir / f"{record.name}.yml"


# Emission order for every record.
DEFAULT_EMITTERS: tuple[type[Emitter], ...] = (
    DockerfileEmitter,
    HelmChartEmitter,
    HelmValuesEmitter,
    ArgoApplicationEmitter,
    CIWorkflowEmitter,
)


def build_emitters(
    renderer: TemplateRenderer,
    config: BootstrapConfig,
    emitter_classes: tuple[type[Emitter], ...] = DEFAULT_EMITTERS,
) -> list[Emitter]:
    """Instantiate every emitter class against a shared renderer and config."""
    return [cls(renderer, config) for cls in emitter_classes]

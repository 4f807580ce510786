"""Grafana dashboard stubs, one per namespace.

The namespace list comes from configuration, not from the registry, so the
same set of dashboards is produced whatever services are registered.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from neura_bootstrap.config import ArtifactKind, BootstrapConfig
from neura_bootstrap.utils import print_status

from .templates import TemplateRenderer
from .writer import ArtifactWriter


class DashboardEmitter:
    """Renders the overview dashboard for a namespace."""

    kind = ArtifactKind.DASHBOARD
    template = "grafana/dashboard.json.j2"

    def __init__(self, renderer: TemplateRenderer, config: BootstrapConfig) -> None:
        self.renderer = renderer
        self.config = config

    def target(self, namespace: str) -> Path:
        return self.config.dashboards_dir / f"{namespace}.json"

    def render(self, namespace: str) -> str:
        return self.renderer.render(self.template, {"namespace": namespace})


def register_dashboards(
    emitter: DashboardEmitter,
    writer: ArtifactWriter,
    namespaces: Iterable[str] | None = None,
) -> list[Path]:
    """Write one dashboard per namespace and return the written paths."""
    if namespaces is None:
        namespaces = emitter.config.dashboard_namespaces
    policy = emitter.config.policy_for(emitter.kind)

    paths: list[Path] = []
    for namespace in namespaces:
        print_status("dashboard", f"Registering Grafana dashboard for {namespace}...")
        path = emitter.target(namespace)
        writer.write(path, emitter.render(namespace), policy)
        paths.append(path)
    return paths


__all__ = [
    "DashboardEmitter",
    "register_dashboards",
]

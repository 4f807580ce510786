"""Neura bootstrap pipeline.

Runs the single, sequential bootstrap pass:

1. Probe required external tools.
2. Load and validate ``service-registry.yaml``.
3. For every service: directory skeleton, Dockerfile, Helm chart, ArgoCD
   application and (once) a CI workflow.
4. Copy the shared schema files into every ``api`` directory.
5. Register one Grafana dashboard per configured namespace.

Usage::

    python -m neura_bootstrap --root .
    neura-bootstrap --root . --registry service-registry.yaml
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel, Field

from neura_bootstrap.config import ArtifactKind, BootstrapConfig
from neura_bootstrap.errors import BootstrapError
from neura_bootstrap.prerequisites import check_prerequisites
from neura_bootstrap.registry import ServiceRecord, load_registry
from neura_bootstrap.scaffolder import (
    ArtifactWriter,
    DashboardEmitter,
    TemplateRenderer,
    build_emitters,
    create_skeleton,
    register_dashboards,
    sync_shared_schema,
)
from neura_bootstrap.utils import (
    console,
    ensure_dir,
    print_error,
    print_status,
    print_success,
    print_summary_table,
)

NEXT_STEP_HINT = "Next: run ./scripts/deploy-all.sh to start in Kubernetes."


class BootstrapReport(BaseModel):
    """What a completed run did."""

    services: list[str] = Field(default_factory=list)
    files_written: int = 0
    files_preserved: int = 0
    api_dirs_synced: int = 0
    dashboards: list[str] = Field(default_factory=list)

    def as_summary(self) -> dict[str, object]:
        return {
            "Services": len(self.services),
            "Files written": self.files_written,
            "Files preserved": self.files_preserved,
            "API dirs synced": self.api_dirs_synced,
            "Dashboards": len(self.dashboards),
        }


class Bootstrapper:
    """Drives one bootstrap run against a ``BootstrapConfig``.

    Every step runs to completion before the next starts. Any error aborts
    the run where it happened; files written so far are left in place.
    """

    def __init__(self, config: BootstrapConfig) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.writer = ArtifactWriter()
        self.emitters = build_emitters(self.renderer, config)
        self.dashboard_emitter = DashboardEmitter(self.renderer, config)

    def run(self) -> BootstrapReport:
        config = self.config
        print_status("start", f"Bootstrapping Neura from registry: {config.registry_path}")

        check_prerequisites(config.required_tools)
        registry = load_registry(config.registry_path)

        ensure_dir(config.helm_charts_dir)
        ensure_dir(config.argo_apps_dir)

        for record in registry.services:
            self.scaffold_service(record)

        print_status("sync", "Syncing global schema and placeholders...")
        api_dirs = sync_shared_schema(config.services_root, config.shared_schema_files)

        dashboards = register_dashboards(self.dashboard_emitter, self.writer)

        report = BootstrapReport(
            services=registry.names(),
            files_written=len(self.writer.written),
            files_preserved=len(self.writer.skipped),
            api_dirs_synced=len(api_dirs),
            dashboards=[path.stem for path in dashboards],
        )
        print_summary_table(report.as_summary(), title="Bootstrap")
        print_success(f"Bootstrap complete! {len(report.services)} services initialized.")
        console.print(NEXT_STEP_HINT)
        return report

    def scaffold_service(self, record: ServiceRecord) -> None:
        """Create the skeleton for *record* and emit all of its artifacts."""
        print_status(
            "service",
            f"Setting up {record.name} in {record.path} "
            f"(lang={record.language} port={record.port} ns={record.namespace})",
        )
        create_skeleton(
            self.config.root_dir,
            record,
            writer=self.writer,
            readme_policy=self.config.policy_for(ArtifactKind.README),
        )
        ensure_dir(self.config.helm_charts_dir / record.name / "templates")

        for emitter in self.emitters:
            self.writer.write(
                emitter.target(record),
                emitter.render(record),
                self.config.policy_for(emitter.kind),
            )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``neura-bootstrap`` and ``python -m neura_bootstrap``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Scaffold services, Helm charts and ArgoCD apps from the service registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  neura-bootstrap\n"
            "  neura-bootstrap --root ~/src/neura\n"
            "  neura-bootstrap --registry registries/staging.yaml\n"
        ),
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Repository root to scaffold into (default: $NEURA_ROOT_DIR or .)",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="Registry file, relative to the root (default: service-registry.yaml)",
    )
    args = parser.parse_args(argv)

    config = BootstrapConfig.from_env()
    if args.root:
        config.root_dir = Path(args.root)
    if args.registry:
        config.registry_file = args.registry

    try:
        Bootstrapper(config).run()
    except BootstrapError as exc:
        print_error(str(exc))
        return 1
    except OSError as exc:
        print_error(f"Bootstrap aborted: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

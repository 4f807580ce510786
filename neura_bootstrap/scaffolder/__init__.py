"""Neura service scaffolder -- skeletons, emitters and shared-file sync.

Quick usage::

    from neura_bootstrap.config import BootstrapConfig
    from neura_bootstrap.scaffolder import TemplateRenderer, build_emitters

    config = BootstrapConfig(root_dir=Path("."))
    for emitter in build_emitters(TemplateRenderer(), config):
        print(emitter.target(record), emitter.render(record))
"""

from neura_bootstrap.scaffolder.dashboards import DashboardEmitter, register_dashboards
from neura_bootstrap.scaffolder.emitters import DEFAULT_EMITTERS, Emitter, build_emitters
from neura_bootstrap.scaffolder.schema_sync import find_api_dirs, sync_shared_schema
from neura_bootstrap.scaffolder.skeleton import SKELETON_DIRS, create_skeleton
from neura_bootstrap.scaffolder.templates import TemplateRenderer
from neura_bootstrap.scaffolder.writer import ArtifactWriter, WriteOutcome

__all__ = [
    "ArtifactWriter",
    "DEFAULT_EMITTERS",
    "DashboardEmitter",
    "Emitter",
    "SKELETON_DIRS",
    "TemplateRenderer",
    "WriteOutcome",
    "build_emitters",
    "create_skeleton",
    "find_api_dirs",
    "register_dashboards",
    "sync_shared_schema",
]

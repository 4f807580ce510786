"""Service registry models and loader.

Usage::

    from neura_bootstrap.registry import load_registry

    registry = load_registry("service-registry.yaml")
    for record in registry.services:
        print(record.name, record.port)
"""

from neura_bootstrap.registry.loader import load_registry
from neura_bootstrap.registry.models import ServiceRecord, ServiceRegistry

__all__ = [
    "ServiceRecord",
    "ServiceRegistry",
    "load_registry",
]

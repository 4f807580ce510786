"""Neura bootstrap: scaffold services and their deployment manifests from the service registry."""

__version__ = "3.0.0"

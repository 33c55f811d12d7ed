"""Registry HTTP API v2 client."""

from .client import MANIFEST_V2, RegistryClient, RegistrySession

__all__ = ["MANIFEST_V2", "RegistryClient", "RegistrySession"]

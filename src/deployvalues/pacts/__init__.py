"""Public contracts for callers and secret store implementations."""

from deployvalues.pacts.types import MissingSecretWarning, RenderResult, ResolveResult
from deployvalues.pacts.stores import (
    EnvSecretStore, FileSecretStore, ManifestSecretStore, MappingSecretStore,
    SecretStore, build_store,
)

__all__ = [
    "MissingSecretWarning",
    "RenderResult",
    "ResolveResult",
    "SecretStore",
    "MappingSecretStore",
    "EnvSecretStore",
    "FileSecretStore",
    "ManifestSecretStore",
    "build_store",
]

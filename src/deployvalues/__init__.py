"""deployvalues — render deployment values templates from variable and secret mappings.

Re-exports the public API. The pipeline is parse_mapping → resolve →
render → masked_log.
"""

from deployvalues.pacts.types import MissingSecretWarning, RenderResult, ResolveResult
from deployvalues.pacts.stores import (
    EnvSecretStore, FileSecretStore, ManifestSecretStore, MappingSecretStore,
    SecretStore, build_store,
)
from deployvalues.core.mapping import MalformedMappingError, parse_mapping
from deployvalues.core.env import MissingSecretError, resolve
from deployvalues.core.render import render
from deployvalues.core.masking import masked_log

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
    "MalformedMappingError",
    "parse_mapping",
    "MissingSecretError",
    "resolve",
    "render",
    "masked_log",
]

"""
Shared test fixtures.
"""

from pathlib import Path

import pytest

from deployvalues.pacts.stores import MappingSecretStore


@pytest.fixture
def store() -> MappingSecretStore:
    """A secret store with deterministic contents."""
    return MappingSecretStore({
        "DB_PASSWORD_SECRET": "s3cr3t",
        "API_TOKEN": "tok-123",
        "EMPTY_SECRET": "",
    })


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """A helm values template using every placeholder form."""
    path = tmp_path / "values.yaml"
    path.write_text(
        "image:\n"
        "  tag: ${TAG}\n"
        "db:\n"
        "  host: ${DB_HOST:-localhost}\n"
        "  password: ${DB_PASSWORD}\n"
        "replicas: ${REPLICAS}\n",
        encoding="utf-8",
    )
    return path

"""Secret store base class and the built-in stores.

A secret store is the only way the resolver reaches secret material.
It is injected by the caller, so tests can hand in a fixed mapping and
the CLI can pick the store matching the CI platform.
"""

import os
from pathlib import Path

import yaml

from deployvalues.pacts.helpers import _present, _secret_value


class SecretStore:
    """Base class for secret stores.

    Subclass and implement ``lookup``. Return None when the secret does
    not exist; empty values are treated the same way by the resolver.
    """
    name: str = ""

    def lookup(self, secret_ref: str) -> str | None:
        """Return the value stored under *secret_ref*, or None."""
        return None

    def __call__(self, secret_ref: str) -> str | None:
        return self.lookup(secret_ref)


class MappingSecretStore(SecretStore):
    """Secrets held in a plain dict."""
    name = "mapping"

    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def lookup(self, secret_ref):
        return _present(self.data.get(secret_ref))


class EnvSecretStore(SecretStore):
    """Secrets exposed as environment variables by the CI runner."""
    name = "env"

    def __init__(self, environ: dict[str, str] | None = None, prefix: str = ""):
        self.environ = os.environ if environ is None else environ
        self.prefix = prefix

    def lookup(self, secret_ref):
        return _present(self.environ.get(self.prefix + secret_ref))


class FileSecretStore(SecretStore):
    """One file per secret in a mounted directory (e.g. /run/secrets)."""
    name = "file"

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def lookup(self, secret_ref):
        # Refs are plain file names, never paths
        if not secret_ref or "/" in secret_ref or "\\" in secret_ref or secret_ref in (".", ".."):
            return None
        path = self.directory / secret_ref
        if not path.is_file():
            return None
        return _present(path.read_text(encoding="utf-8").rstrip("\r\n"))


class ManifestSecretStore(SecretStore):
    """Kubernetes Secret manifests read from a (multi-document) YAML file.

    Refs are ``secret/key`` or a bare ``key``. A bare key is looked up in
    *secret_name* when given, otherwise in every Secret in file order.
    """
    name = "manifest"

    def __init__(self, path: str, secret_name: str | None = None):
        self.path = path
        self.secret_name = secret_name
        self.secrets = self._load(path)

    @staticmethod
    def _load(path: str) -> dict[str, dict]:
        """Index Secret manifests by name."""
        secrets: dict[str, dict] = {}
        with open(path, encoding="utf-8") as f:
            for doc in yaml.safe_load_all(f):
                if not doc or not isinstance(doc, dict) or doc.get("kind") != "Secret":
                    continue
                name = (doc.get("metadata") or {}).get("name", "")
                if name:
                    secrets[name] = doc
        return secrets

    def lookup(self, secret_ref):
        if "/" in secret_ref:
            sec_name, key = secret_ref.split("/", 1)
            return _present(_secret_value(self.secrets.get(sec_name, {}), key))
        if self.secret_name is not None:
            return _present(_secret_value(self.secrets.get(self.secret_name, {}), secret_ref))
        for sec in self.secrets.values():
            val = _present(_secret_value(sec, secret_ref))
            if val is not None:
                return val
        return None


def build_store(spec: str) -> SecretStore:
    """Build a store from its CLI form.

    ``env``, ``env:PREFIX``, ``file:DIR``, ``manifest:PATH`` or
    ``manifest:PATH#SECRET``.
    """
    kind, _, arg = spec.partition(":")
    if kind == "env":
        return EnvSecretStore(prefix=arg)
    if kind == "file":
        if not arg:
            raise ValueError("file secret store needs a directory: file:DIR")
        return FileSecretStore(arg)
    if kind == "manifest":
        if not arg:
            raise ValueError("manifest secret store needs a path: manifest:PATH[#SECRET]")
        path, _, secret_name = arg.partition("#")
        return ManifestSecretStore(path, secret_name or None)
    raise ValueError(f"unknown secret store '{spec}' (expected env, file:DIR or manifest:PATH)")

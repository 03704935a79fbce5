"""deployvalues.yaml loading and saving."""

import os

import yaml

from deployvalues.core.constants import CONFIG_VERSION, REDACTED

# Keys that must hold a YAML boolean
_BOOL_KEYS = ("strict_secrets", "fail_on_unresolved")


def load_config(path: str) -> dict:
    """Load deployvalues.yaml or return the default config.

    Unparsable YAML and wrongly typed switches raise ValueError.
    """
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            try:
                cfg = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"{path}: invalid YAML: {exc}") from exc
        if not isinstance(cfg, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
    else:
        cfg = {}
    cfg.setdefault("deployValuesVersion", CONFIG_VERSION)
    cfg.setdefault("strict_secrets", False)
    cfg.setdefault("fail_on_unresolved", False)
    cfg.setdefault("redaction_marker", REDACTED)
    cfg.setdefault("secret_store", "env")
    cfg.setdefault("output", None)
    for key in _BOOL_KEYS:
        if not isinstance(cfg[key], bool):
            raise ValueError(f"{path}: '{key}' must be true or false, "
                             f"got {cfg[key]!r}")
    return cfg


def save_config(path: str, config: dict) -> None:
    """Write deployvalues.yaml."""
    header = "# Configuration for deployvalues (values template rendering)\n\n"
    # Ensure version key comes first
    ordered = {"deployValuesVersion": config.get("deployValuesVersion", CONFIG_VERSION)}
    for k, v in config.items():
        if k != "deployValuesVersion":
            ordered[k] = v
    with open(path, "w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(ordered, f, default_flow_style=False, sort_keys=False)

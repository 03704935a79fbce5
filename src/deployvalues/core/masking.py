"""Redacted environment dumps for audit trails."""

from deployvalues.core.constants import REDACTED


def masked_log(env: dict[str, str], marker: str = REDACTED) -> str:
    """Return one ``NAME=<marker>`` line per entry, keeping env order."""
    return "\n".join(f"{name}={marker}" for name in env)

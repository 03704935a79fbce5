"""Environment resolution: plain variables plus secret references."""

from typing import Callable

from deployvalues.pacts.types import MissingSecretWarning, ResolveResult


class MissingSecretError(LookupError):
    """Strict policy: one or more referenced secrets were not found."""

    def __init__(self, result: ResolveResult):
        self.result = result
        missing = ", ".join(f"{w.name} (secret: {w.secret_ref})" for w in result.warnings)
        super().__init__(f"secrets not found for: {missing}")


def _resolve_secret_entry(name: str, secret_ref: str, lookup: Callable,
                          result: ResolveResult) -> None:
    """Bind a single secret-backed variable, or record it as missing."""
    if name in result.env:
        result.log.append(f"variable {name} overridden by secret")
    val = lookup(secret_ref)
    if val is None or val == "":
        result.env[name] = ""
        result.warnings.append(MissingSecretWarning(name, secret_ref))
        return
    result.env[name] = val
    result.log.append(f"setting secret variable: {name} (from secret: {secret_ref})")


def resolve(variables: dict[str, str], secrets: dict[str, str],
            lookup: Callable[[str], str | None],
            strict: bool = False) -> ResolveResult:
    """Merge variables and secret references into one environment.

    Variables are applied first and secrets second, so a secret wins over a
    variable of the same name. A missing secret binds an empty string and
    yields a MissingSecretWarning; with *strict* the whole pass still runs,
    then MissingSecretError is raised carrying the partial result.
    """
    result = ResolveResult()

    for name, val in variables.items():
        result.env[name] = val
        result.log.append(f"setting variable: {name}")

    for name, secret_ref in secrets.items():
        _resolve_secret_entry(name, secret_ref, lookup, result)

    if strict and result.warnings:
        raise MissingSecretError(result)
    return result

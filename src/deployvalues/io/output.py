"""Rendered values file and stderr diagnostics."""

import os
import sys
import tempfile


def write_values(text: str, output: str | None = None, suffix: str = ".yaml") -> str:
    """Write the rendered document and return its path.

    Without *output* a temporary file is created; it is left in place for
    the deployment tool and the caller decides when to remove it.
    """
    if output:
        parent = os.path.dirname(output)
        if parent:
            os.makedirs(parent, exist_ok=True)
        path = output
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        fd, path = tempfile.mkstemp(prefix="deployvalues-", suffix=suffix)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    print(f"Wrote {path}", file=sys.stderr)
    return path


def emit_log(log: list[str]) -> None:
    """Print the resolution trail to stderr (names only, never values)."""
    for line in log:
        print(line, file=sys.stderr)


def emit_masked(masked: str) -> None:
    """Print the masked environment dump."""
    if masked:
        print("Resolved environment:", file=sys.stderr)
        for line in masked.splitlines():
            print(f"  {line}", file=sys.stderr)


def emit_warnings(warnings: list) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)


def emit_unresolved(unresolved: list[str]) -> None:
    """Print a notice for every placeholder left in the rendered document."""
    for name in unresolved:
        print(f"⚠ unresolved placeholder ${{{name}}}: no variable, secret or default",
              file=sys.stderr)

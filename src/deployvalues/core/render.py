"""Placeholder substitution in values templates."""

from deployvalues.core.constants import _PLACEHOLDER_RE
from deployvalues.pacts.types import RenderResult


def render(template: str, env: dict[str, str]) -> RenderResult:
    """Replace ${NAME} and ${NAME:-default} tokens with values from *env*.

    Values are inserted verbatim. A name missing from *env* takes its default
    when one is given, otherwise the token is kept as-is and reported in
    ``unresolved``. Inserted values are not scanned again.
    """
    unresolved: list[str] = []

    def _replace(m):
        """Resolve a single placeholder match."""
        name, default = m.group(1), m.group(2)
        if name in env:
            return env[name]
        if default is not None:
            return default
        if name not in unresolved:
            unresolved.append(name)
        return m.group(0)

    return RenderResult(text=_PLACEHOLDER_RE.sub(_replace, template), unresolved=unresolved)

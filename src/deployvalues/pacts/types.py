"""Public data types shared by the resolver, renderer and callers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MissingSecretWarning:
    """A referenced secret was not found in the secret store."""
    name: str
    secret_ref: str

    def __str__(self) -> str:
        return f"secret not found for variable {self.name} (secret: {self.secret_ref})"


@dataclass
class ResolveResult:
    """Output of a resolution pass."""
    env: dict = field(default_factory=dict)
    warnings: list = field(default_factory=list)
    log: list = field(default_factory=list)


@dataclass
class RenderResult:
    """Rendered text plus the placeholder names left verbatim."""
    text: str = ""
    unresolved: list = field(default_factory=list)

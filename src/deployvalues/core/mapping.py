"""JSON mapping parsing: variables and secret references."""

import json
from pathlib import Path


class MalformedMappingError(ValueError):
    """A mapping input is not a JSON object of string to string."""

    def __init__(self, message: str, label: str = "mapping",
                 lineno: int | None = None, colno: int | None = None,
                 pos: int | None = None):
        self.label = label
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
        where = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(f"{label}: {message}{where}")


def _reject_duplicates(label: str):
    """Build an object_pairs_hook that refuses repeated keys."""
    def _hook(pairs):
        obj = {}
        for key, val in pairs:
            if key in obj:
                raise MalformedMappingError(f"duplicate name '{key}'", label)
            obj[key] = val
        return obj
    return _hook


def parse_mapping(json_text: str | None, label: str = "mapping") -> dict[str, str]:
    """Parse a JSON object of name → string value.

    Empty (or whitespace-only) text means no entries. Anything outside the
    string → string shape is rejected here, so later steps can rely on it.
    """
    if json_text is None or not json_text.strip():
        return {}
    try:
        data = json.loads(json_text, object_pairs_hook=_reject_duplicates(label))
    except json.JSONDecodeError as exc:
        raise MalformedMappingError(
            f"invalid JSON: {exc.msg}", label,
            lineno=exc.lineno, colno=exc.colno, pos=exc.pos,
        ) from exc
    if not isinstance(data, dict):
        raise MalformedMappingError(
            f"expected a JSON object, got {type(data).__name__}", label)
    for name, val in data.items():
        if not isinstance(val, str):
            raise MalformedMappingError(
                f"value of '{name}' must be a string, got {type(val).__name__}", label)
    return data


def load_mapping_arg(arg: str | None, label: str = "mapping") -> dict[str, str]:
    """Parse a CLI mapping argument: ``@path`` reads the JSON from a file."""
    if arg and arg.startswith("@"):
        path = Path(arg[1:])
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MalformedMappingError(f"cannot read {path}: {exc.strerror}", label) from exc
        return parse_mapping(text, label)
    return parse_mapping(arg, label)

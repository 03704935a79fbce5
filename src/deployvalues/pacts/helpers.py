"""Public helper functions available to secret store implementations."""

import base64


def _secret_value(secret: dict, key: str) -> str | None:
    """Get a decoded value from a K8s Secret (base64 data or plain stringData)."""
    # stringData is plain text
    val = (secret.get("stringData") or {}).get(key)
    if val is not None:
        return str(val)
    # data is base64-encoded
    val = (secret.get("data") or {}).get(key)
    if val is not None:
        try:
            return base64.b64decode(val, validate=True).decode("utf-8")
        except (ValueError, UnicodeDecodeError):
            return str(val)  # fallback: return raw if decode fails
    return None


def _present(val: str | None) -> str | None:
    """Normalize a looked-up value: empty strings count as absent."""
    if val is None or val == "":
        return None
    return val

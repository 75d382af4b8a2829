"""Redaction of credentials before anything is written to debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "auth_token",
    "token",
    "key_secret",
    "secret",
    "password",
})

REDACTED_VALUE = "[REDACTED]"


def redact(obj: Any) -> Any:
    """Recursively replace sensitive values, matching keys case-insensitively.

    Returns a new structure; the input is never mutated.
    """
    if isinstance(obj, Mapping):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact(value)
        return result
    elif isinstance(obj, list):
        return [redact(item) for item in obj]
    else:
        return obj


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a plain dict copy of ``headers`` safe to print."""
    return redact(dict(headers.items()))

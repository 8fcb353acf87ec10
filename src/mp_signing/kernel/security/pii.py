"""Kernel security – field names whose values must never reach a log sink."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "secret_key", "key", "key_material",
    "token", "api_key", "apikey", "authorization", "signature",
    "x-webhook-signature",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]

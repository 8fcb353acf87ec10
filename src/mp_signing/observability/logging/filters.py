"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_signing.kernel.security import DEFAULT_SENSITIVE_FIELDS


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Key matching is case-insensitive so HTTP header names such as
    ``X-Webhook-Signature`` are caught however the transport spells them.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(f.lower() for f in fields)

    def is_sensitive(self, name: str) -> bool:
        return name.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Recursively redact nested mappings, lists and ``(name, value)`` header pairs."""
        return {
            k: self.REDACTED if self.is_sensitive(k) else self._redact_value(v)
            for k, v in data.items()
        }

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            if len(value) == 2 and isinstance(value[0], str) and self.is_sensitive(value[0]):
                redacted = [value[0], self.REDACTED]
            else:
                redacted = [self._redact_value(v) for v in value]
            return tuple(redacted) if isinstance(value, tuple) else redacted
        return value


__all__ = ["SensitiveFieldsFilter"]

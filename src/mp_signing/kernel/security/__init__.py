"""Kernel security – default sensitive field names."""
from mp_signing.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]

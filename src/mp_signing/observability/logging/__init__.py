"""Observability – structured logging helpers."""
from mp_signing.observability.logging.filters import SensitiveFieldsFilter
from mp_signing.observability.logging.factory import JsonLoggerFactory
from mp_signing.observability.logging.processors import get_logger, redact_sensitive_fields

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "redact_sensitive_fields",
]

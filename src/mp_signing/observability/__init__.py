"""Observability – structured logging."""

from mp_signing.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]

"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from mp_signing.observability.logging.filters import SensitiveFieldsFilter


def redact_sensitive_fields(
    sensitive_fields: frozenset[str] | None = None,
) -> structlog.types.Processor:
    """Return a structlog processor that redacts sensitive keys recursively.

    Usage::

        structlog.configure(processors=[redact_sensitive_fields(), ...])
    """
    _filter = SensitiveFieldsFilter(sensitive_fields)

    def _redact(
        logger: Any,           # noqa: ARG001
        method_name: str,      # noqa: ARG001
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return _filter.redact_deep(event_dict)

    return _redact


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by the stdlib logger *name*.

    Events go through :mod:`logging`, so until the application configures
    logging (for example with :meth:`JsonLoggerFactory.configure`) this
    package's DEBUG events stop at the root logger's default WARNING level
    instead of being printed to stdout.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "redact_sensitive_fields"]

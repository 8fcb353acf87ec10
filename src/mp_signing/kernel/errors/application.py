"""Application-layer errors — configuration and other use-case level concerns."""

from __future__ import annotations

from mp_signing.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]

"""Kernel – framework-agnostic building blocks shared by every layer."""

from mp_signing.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
]

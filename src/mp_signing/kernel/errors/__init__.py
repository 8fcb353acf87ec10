"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError                    (mp_signing.config.validation)
    │       └── InvalidKeyError            (mp_signing.security.signing)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
            ├── EncodingError              (mp_signing.security.signing)
            └── DecodingError              (mp_signing.security.signing)
"""

from mp_signing.kernel.errors.application import ApplicationError
from mp_signing.kernel.errors.base import BaseError
from mp_signing.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
]

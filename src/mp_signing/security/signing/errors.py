"""Signing errors.

``DecodingError`` never escapes :func:`~mp_signing.security.signing.verify`;
a malformed signature is reported to callers as ``False``.
"""
from __future__ import annotations

from typing import Any

from mp_signing.config.validation.errors import ConfigError
from mp_signing.kernel.errors import SerializationError

__all__ = ["DecodingError", "EncodingError", "InvalidKeyError"]


class InvalidKeyError(ConfigError):
    """Key material is missing, empty or not decodable."""

    default_code = "invalid_key"


class EncodingError(SerializationError):
    """A message value has no canonical byte form.

    ``path`` locates the offending value, e.g. ``$.items[2].price``.
    """

    default_code = "encoding_error"

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any) -> None:
        if path is not None:
            kwargs.setdefault("detail", {"path": path})
        super().__init__(message, payload_type="message", **kwargs)
        self.path = path


class DecodingError(SerializationError):
    """Signature text is not base64 or has the wrong digest length."""

    default_code = "decoding_error"

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, payload_type="signature", **kwargs)

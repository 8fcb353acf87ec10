"""Signing – SecretKey, the shared HMAC key material."""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from mp_signing.security.signing.errors import InvalidKeyError

__all__ = ["SecretKey"]


@dataclass(frozen=True, eq=False, repr=False)
class SecretKey:
    """Immutable HMAC key material.

    Decode once at configuration time and pass the instance to every
    ``sign``/``verify`` call. The material never appears in ``repr``/``str``
    and the object has identity equality only, so it cannot end up compared
    against request data.

    Examples::

        key = SecretKey.from_base64(os.environ["WEBHOOK_SECRET"])
        key = SecretKey(b"raw-bytes")
    """

    material: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.material, (bytes, bytearray, memoryview)):
            raise InvalidKeyError(
                "Key material must be bytes",
                detail={"received": type(self.material).__name__},
            )
        if len(self.material) == 0:
            raise InvalidKeyError("Key material must not be empty")
        object.__setattr__(self, "material", bytes(self.material))

    @classmethod
    def from_base64(cls, encoded: str | bytes | None) -> SecretKey:
        """Decode standard-alphabet, padded base64 text into a key.

        Raises:
            InvalidKeyError: when *encoded* is missing, blank or not base64.
        """
        if encoded is None:
            raise InvalidKeyError("Key is missing")
        if not isinstance(encoded, (str, bytes)):
            raise InvalidKeyError(
                "Key must be base64 text",
                detail={"received": type(encoded).__name__},
            )
        text = encoded.strip()
        if not text:
            raise InvalidKeyError("Key must not be empty")
        try:
            raw = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidKeyError("Key is not valid base64") from exc
        return cls(raw)

    def __len__(self) -> int:
        return len(self.material)

    def __repr__(self) -> str:
        return f"SecretKey(<redacted {len(self.material)} bytes>)"

"""Signing – HMAC-SHA256 signatures and constant-time verification.

A signature is the standard-alphabet, padded base64 encoding of
``HMAC-SHA256(key, payload)``, always 44 characters long.
"""
from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, NewType

from mp_signing.observability.logging import get_logger
from mp_signing.security.signing.canonical import Message, canonicalize
from mp_signing.security.signing.errors import DecodingError, InvalidKeyError
from mp_signing.security.signing.key import SecretKey

__all__ = [
    "DIGEST_SIZE",
    "SIGNATURE_HEADER",
    "Signature",
    "SignedMessage",
    "WebhookSigner",
    "constant_time_equals",
    "decode_signature",
    "sign",
    "verify",
]

Signature = NewType("Signature", str)

DIGEST_SIZE = hashlib.sha256().digest_size
SIGNATURE_HEADER = "X-Webhook-Signature"

_log = get_logger(__name__)


def sign(key: SecretKey, payload: bytes) -> Signature:
    """Return the base64 HMAC-SHA256 signature of *payload*.

    Deterministic: the same key and payload always give the same signature.

    Raises:
        InvalidKeyError: when *key* is not a :class:`SecretKey`.
        TypeError: when *payload* is not bytes-like (text and ``None`` included).
    """
    return Signature(base64.b64encode(_digest(key, payload)).decode("ascii"))


def verify(key: SecretKey, payload: bytes, candidate_signature: Any) -> bool:
    """Return ``True`` iff *candidate_signature* is the signature of *payload*.

    Malformed candidates (not base64, wrong digest length, not text at all)
    return ``False`` exactly like a wrong signature does; only a missing or
    invalid key raises.
    """
    expected = _digest(key, payload)
    try:
        received = decode_signature(candidate_signature)
    except DecodingError:
        received = b""
    if constant_time_equals(expected, received):
        return True
    _log.debug("signing.verify_rejected", payload_size=len(payload))
    return False


def decode_signature(text: str | bytes) -> bytes:
    """Decode signature text into a raw digest.

    Raises:
        DecodingError: when *text* is not strict base64 or does not decode
            to :data:`DIGEST_SIZE` bytes.
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise DecodingError("Signature is not valid base64", cause=exc) from exc
    if len(raw) != DIGEST_SIZE:
        raise DecodingError(
            f"Signature must decode to {DIGEST_SIZE} bytes",
            detail={"length": len(raw)},
        )
    return raw


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte sequences in time independent of their content.

    Lengths are not secret and are checked first. Otherwise every byte pair
    is XORed and OR-accumulated, so all positions are visited no matter
    where (or whether) the sequences differ; the result is tested once at
    the end.
    """
    if len(a) != len(b):
        return False
    result = 0
    for x, y in zip(a, b):
        result |= x ^ y
    return result == 0


def _digest(key: SecretKey, payload: bytes) -> bytes:
    if not isinstance(key, SecretKey):
        raise InvalidKeyError(
            "A SecretKey is required",
            detail={"received": type(key).__name__},
        )
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"payload must be bytes, got {type(payload).__name__}; encode text before signing"
        )
    return hmac.new(key.material, payload, hashlib.sha256).digest()


@dataclass(frozen=True)
class SignedMessage:
    """Canonical body plus its signature, ready to hand to a transport."""

    body: bytes
    signature: Signature


class WebhookSigner:
    """Signs and verifies webhook payloads with one bound :class:`SecretKey`.

    Safe to share between threads: the key is immutable and no other state
    is kept.
    """

    def __init__(self, key: SecretKey) -> None:
        if not isinstance(key, SecretKey):
            raise InvalidKeyError(
                "A SecretKey is required",
                detail={"received": type(key).__name__},
            )
        self._key = key

    @classmethod
    def from_base64(cls, encoded: str) -> WebhookSigner:
        return cls(SecretKey.from_base64(encoded))

    def sign(self, payload: bytes) -> Signature:
        return sign(self._key, payload)

    def verify(self, payload: bytes, signature: Any) -> bool:
        return verify(self._key, payload, signature)

    def sign_message(self, message: Message) -> SignedMessage:
        """Canonicalize *message* and sign the resulting bytes."""
        body = canonicalize(message)
        signed = SignedMessage(body=body, signature=self.sign(body))
        _log.debug("signing.signed", payload_size=len(body))
        return signed

    @staticmethod
    def headers(signed: SignedMessage) -> dict[str, str]:
        """HTTP headers a sender attaches to the body."""
        return {
            "Content-Type": "application/json",
            SIGNATURE_HEADER: signed.signature,
        }

    def __repr__(self) -> str:
        return f"WebhookSigner(key={self._key!r})"

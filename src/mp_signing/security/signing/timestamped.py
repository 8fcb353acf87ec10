"""Signing – timestamp-bound signatures for replay protection.

The signed bytes are the decimal Unix timestamp immediately followed by the
body, so a captured request cannot be replayed once it falls outside the
receiver's tolerance window::

    X-Webhook-Timestamp: 1627062582
    X-Webhook-Signature: base64(HMAC-SHA256(key, b"1627062582" + body))
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from mp_signing.config.validation.errors import InvalidSettingValueError
from mp_signing.kernel.time import Clock, SystemClock
from mp_signing.observability.logging import get_logger
from mp_signing.security.signing.errors import InvalidKeyError
from mp_signing.security.signing.key import SecretKey
from mp_signing.security.signing.signer import SIGNATURE_HEADER, Signature, sign, verify

__all__ = [
    "DEFAULT_TOLERANCE",
    "TIMESTAMP_HEADER",
    "TimestampedSignature",
    "TimestampedSigner",
    "signing_input",
]

TIMESTAMP_HEADER = "X-Webhook-Timestamp"
DEFAULT_TOLERANCE = timedelta(minutes=5)

# Longer digit strings are rejected before int() conversion.
_MAX_TIMESTAMP_DIGITS = 12

_log = get_logger(__name__)


@dataclass(frozen=True)
class TimestampedSignature:
    signature: Signature
    timestamp: int


def signing_input(timestamp: int | str, body: bytes) -> bytes:
    """Bytes covered by a timestamped signature."""
    _check_body(body)
    return str(timestamp).encode("ascii") + bytes(body)


def _check_body(body: Any) -> None:
    if not isinstance(body, (bytes, bytearray, memoryview)):
        raise TypeError(f"body must be bytes, got {type(body).__name__}")


class TimestampedSigner:
    """Sign bodies with the current time and reject stale or future timestamps.

    Parameters
    ----------
    key:
        Shared HMAC key.
    tolerance:
        Maximum allowed distance between the receiver's clock and the
        timestamp, in either direction.
    clock:
        Time source; defaults to :class:`~mp_signing.kernel.time.SystemClock`.
    """

    def __init__(
        self,
        key: SecretKey,
        *,
        tolerance: timedelta = DEFAULT_TOLERANCE,
        clock: Clock | None = None,
    ) -> None:
        if not isinstance(key, SecretKey):
            raise InvalidKeyError(
                "A SecretKey is required",
                detail={"received": type(key).__name__},
            )
        if tolerance <= timedelta(0):
            raise InvalidSettingValueError("tolerance", tolerance, "must be positive")
        self._key = key
        self._tolerance = tolerance
        self._clock: Clock = clock or SystemClock()

    @property
    def tolerance(self) -> timedelta:
        return self._tolerance

    def sign(self, body: bytes) -> TimestampedSignature:
        timestamp = int(self._clock.timestamp())
        signature = sign(self._key, signing_input(timestamp, body))
        return TimestampedSignature(signature=signature, timestamp=timestamp)

    @staticmethod
    def headers(signed: TimestampedSignature) -> dict[str, str]:
        return {
            SIGNATURE_HEADER: signed.signature,
            TIMESTAMP_HEADER: str(signed.timestamp),
        }

    def verify(self, body: bytes, signature: Any, timestamp: Any) -> bool:
        """Return ``True`` iff *timestamp* is fresh and *signature* covers it and *body*.

        The signature is checked over the timestamp text exactly as received.
        Malformed timestamps and signatures return ``False``.
        """
        _check_body(body)
        parsed = _parse_timestamp(timestamp)
        if parsed is None or not self._is_fresh(parsed[1]):
            _log.debug("signing.timestamp_rejected", payload_size=len(body))
            return False
        return verify(self._key, signing_input(parsed[0], body), signature)

    def verify_headers(self, body: bytes, headers: Mapping[str, str]) -> bool:
        """Verify using the signature and timestamp headers (case-insensitive names)."""
        _check_body(body)
        lowered = {name.lower(): value for name, value in headers.items()}
        signature = lowered.get(SIGNATURE_HEADER.lower())
        timestamp = lowered.get(TIMESTAMP_HEADER.lower())
        if signature is None or timestamp is None:
            _log.debug("signing.verify_rejected", payload_size=len(body))
            return False
        return self.verify(body, signature, timestamp)

    def _is_fresh(self, timestamp: int) -> bool:
        age = abs(self._clock.timestamp() - timestamp)
        return age <= self._tolerance.total_seconds()

    def __repr__(self) -> str:
        return f"TimestampedSigner(key={self._key!r}, tolerance={self._tolerance!r})"


def _parse_timestamp(value: Any) -> tuple[str, int] | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return (str(value), value) if 0 <= value < 10**_MAX_TIMESTAMP_DIGITS else None
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            return None
    if not isinstance(value, str):
        return None
    if not value or len(value) > _MAX_TIMESTAMP_DIGITS:
        return None
    if not (value.isascii() and value.isdigit()):
        return None
    return value, int(value)

"""Security — webhook message signing."""
from mp_signing.security.signing import (
    DecodingError,
    EncodingError,
    InvalidKeyError,
    SecretKey,
    Signature,
    SignedMessage,
    TimestampedSignature,
    TimestampedSigner,
    WebhookSigner,
    canonicalize,
    constant_time_equals,
    sign,
    verify,
)

__all__ = [
    "DecodingError",
    "EncodingError",
    "InvalidKeyError",
    "SecretKey",
    "Signature",
    "SignedMessage",
    "TimestampedSignature",
    "TimestampedSigner",
    "WebhookSigner",
    "canonicalize",
    "constant_time_equals",
    "sign",
    "verify",
]

"""Security – webhook message signing (HMAC-SHA256, base64).

Sender::

    key = SecretKey.from_base64(settings.secret)
    body = canonicalize({"user_id": user_id, "kind": "ping"})
    signature = sign(key, body)

Receiver::

    if not verify(key, raw_body, request.headers[SIGNATURE_HEADER]):
        ...  # reject
"""
from mp_signing.security.signing.canonical import MAX_DEPTH, Message, canonicalize, normalize
from mp_signing.security.signing.errors import DecodingError, EncodingError, InvalidKeyError
from mp_signing.security.signing.key import SecretKey
from mp_signing.security.signing.signer import (
    DIGEST_SIZE,
    SIGNATURE_HEADER,
    Signature,
    SignedMessage,
    WebhookSigner,
    constant_time_equals,
    decode_signature,
    sign,
    verify,
)
from mp_signing.security.signing.timestamped import (
    TIMESTAMP_HEADER,
    TimestampedSignature,
    TimestampedSigner,
    signing_input,
)

__all__ = [
    "DIGEST_SIZE",
    "DecodingError",
    "EncodingError",
    "InvalidKeyError",
    "MAX_DEPTH",
    "Message",
    "SIGNATURE_HEADER",
    "SecretKey",
    "Signature",
    "SignedMessage",
    "TIMESTAMP_HEADER",
    "TimestampedSignature",
    "TimestampedSigner",
    "WebhookSigner",
    "canonicalize",
    "constant_time_equals",
    "decode_signature",
    "normalize",
    "sign",
    "signing_input",
    "verify",
]

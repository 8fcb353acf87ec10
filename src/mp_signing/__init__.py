"""
mp_signing – webhook message signing and verification core.

Import path convention::

    from mp_signing.security.signing import SecretKey, canonicalize, sign, verify
    from mp_signing.security.signing import WebhookSigner, TimestampedSigner
    from mp_signing.config.signing import SigningSettings
    from mp_signing.observability.logging import JsonLoggerFactory, get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

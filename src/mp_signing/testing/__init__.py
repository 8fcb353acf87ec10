"""Testing support – hypothesis strategies for signing properties."""

from mp_signing.testing.generators import message_strategy, secret_key_strategy

__all__ = ["message_strategy", "secret_key_strategy"]

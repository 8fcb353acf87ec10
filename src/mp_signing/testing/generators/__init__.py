"""Testing generators – property-based test data."""
from mp_signing.testing.generators.strategies import message_strategy, secret_key_strategy

__all__ = ["message_strategy", "secret_key_strategy"]

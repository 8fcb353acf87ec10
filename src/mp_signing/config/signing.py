"""Config – signing settings loaded from the environment.

Environment::

    WEBHOOK_SECRET=6KQ1CMZGFP84mJoip2crsGw5HpBhctnQ6Zkpj4/pVEqx/...   (base64)
    WEBHOOK_TOLERANCE_SECONDS=300

The secret is decoded once while the settings object is built, so a missing
or malformed key fails at startup rather than on the first request.
"""
from __future__ import annotations

import dataclasses
from datetime import timedelta
from typing import ClassVar

from mp_signing.config.settings import EnvSettingsLoader, Settings
from mp_signing.config.validation import InvalidSettingValueError
from mp_signing.kernel.time import Clock
from mp_signing.security.signing import SecretKey, TimestampedSigner, WebhookSigner


@dataclasses.dataclass
class SigningSettings(Settings):
    """Shared-secret signing configuration."""

    _prefix: ClassVar[str] = "WEBHOOK"

    secret: str = dataclasses.field(repr=False)
    tolerance_seconds: int = 300

    def _validate(self) -> None:
        if self.tolerance_seconds <= 0:
            raise InvalidSettingValueError(
                "tolerance_seconds", self.tolerance_seconds, "must be positive"
            )
        self._secret_key = SecretKey.from_base64(self.secret)

    @classmethod
    def from_env(cls) -> SigningSettings:
        return EnvSettingsLoader().load(cls)

    @property
    def secret_key(self) -> SecretKey:
        return self._secret_key

    @property
    def tolerance(self) -> timedelta:
        return timedelta(seconds=self.tolerance_seconds)

    def signer(self) -> WebhookSigner:
        return WebhookSigner(self._secret_key)

    def timestamped_signer(self, clock: Clock | None = None) -> TimestampedSigner:
        return TimestampedSigner(self._secret_key, tolerance=self.tolerance, clock=clock)


__all__ = ["SigningSettings"]

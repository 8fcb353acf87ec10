"""Unit tests for SigningSettings."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from mp_signing.config.settings import EnvSettingsLoader, SettingsFactory
from mp_signing.config.signing import SigningSettings
from mp_signing.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_signing.kernel.time import FrozenClock
from mp_signing.security.signing import InvalidKeyError, SecretKey, TimestampedSigner, WebhookSigner

REFERENCE_SECRET = (
    "6KQ1CMZGFP84mJoip2crsGw5HpBhctnQ6Zkpj4/pVEqx/enTKvvwjpp57Nq7JS9gqjxyM1PtXcEHJxC0gag+dA=="
)


class TestFromEnv:
    def test_loads_secret(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEBHOOK_SECRET", REFERENCE_SECRET)
        monkeypatch.delenv("WEBHOOK_TOLERANCE_SECONDS", raising=False)
        settings = SigningSettings.from_env()
        assert isinstance(settings.secret_key, SecretKey)
        assert len(settings.secret_key) == 64
        assert settings.tolerance_seconds == 300
        assert settings.tolerance == timedelta(minutes=5)

    def test_loads_tolerance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEBHOOK_SECRET", REFERENCE_SECRET)
        monkeypatch.setenv("WEBHOOK_TOLERANCE_SECONDS", "30")
        assert SigningSettings.from_env().tolerance == timedelta(seconds=30)

    def test_missing_secret_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SigningSettings.from_env()
        assert exc_info.value.setting_name == "WEBHOOK_SECRET"

    @pytest.mark.parametrize("secret", ["", "   ", "not base64!!"])
    def test_bad_secret_fails_fast(self, monkeypatch: pytest.MonkeyPatch, secret: str) -> None:
        monkeypatch.setenv("WEBHOOK_SECRET", secret)
        with pytest.raises(InvalidKeyError):
            EnvSettingsLoader().load(SigningSettings)

    def test_bad_secret_error_does_not_echo_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEBHOOK_SECRET", "c2VjcmV0LXNlY3JldA!")
        with pytest.raises(ConfigError) as exc_info:
            SigningSettings.from_env()
        assert "c2VjcmV0LXNlY3JldA" not in str(exc_info.value)

    @pytest.mark.parametrize("tolerance", ["0", "-5"])
    def test_non_positive_tolerance(self, monkeypatch: pytest.MonkeyPatch, tolerance: str) -> None:
        monkeypatch.setenv("WEBHOOK_SECRET", REFERENCE_SECRET)
        monkeypatch.setenv("WEBHOOK_TOLERANCE_SECONDS", tolerance)
        with pytest.raises(InvalidSettingValueError):
            SigningSettings.from_env()


class TestSigningSettings:
    def test_repr_hides_secret(self) -> None:
        settings = SigningSettings(secret=REFERENCE_SECRET)
        assert REFERENCE_SECRET not in repr(settings)
        assert "tolerance_seconds=300" in repr(settings)

    def test_factory_overrides(self) -> None:
        settings = SettingsFactory.create(
            SigningSettings, overrides={"secret": REFERENCE_SECRET, "tolerance_seconds": 60}
        )
        assert settings.tolerance == timedelta(seconds=60)

    def test_signer(self) -> None:
        signer = SigningSettings(secret=REFERENCE_SECRET).signer()
        assert isinstance(signer, WebhookSigner)
        body = b'{"user_id":"3a2cbc79-00e5-4598-a5b2-74c5059724af","kind":"ping"}'
        assert signer.sign(body) == "Fn7nQsY3UqVKVr1kL7O+yP7J7WSM660oaNbSq42Vy7A="

    def test_timestamped_signer_uses_tolerance_and_clock(self) -> None:
        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=UTC))
        settings = SigningSettings(secret=REFERENCE_SECRET, tolerance_seconds=10)
        signer = settings.timestamped_signer(clock=clock)
        assert isinstance(signer, TimestampedSigner)
        assert signer.tolerance == timedelta(seconds=10)
        signed = signer.sign(b"{}")
        clock.advance(seconds=11)
        assert signer.verify(b"{}", signed.signature, signed.timestamp) is False

    def test_key_decoded_once(self) -> None:
        settings = SigningSettings(secret=REFERENCE_SECRET)
        assert settings.secret_key is settings.secret_key

"""Config validation errors.

Raised while loading :class:`~mp_signing.config.signing.SigningSettings`, so
a deployment with no webhook secret or a bad tolerance fails at start-up
rather than on the first request it tries to verify.
"""
from mp_signing.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is unusable for signing."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting (for example ``WEBHOOK_SECRET``) is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a non-positive tolerance.

    The offending value is kept on the instance but only its type goes into
    ``detail``, so serialized errors never echo a secret back.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' is invalid: {reason}",
            detail={"setting": setting_name, "reason": reason, "type": type(value).__name__},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]

"""Config – 12-factor settings and loaders.

Signing-specific settings live in :mod:`mp_signing.config.signing`.
"""

from mp_signing.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_signing.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]

"""Config – 12-factor settings and loaders."""

from mp_guard.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    GuardSettings,
    Settings,
    SettingsLoader,
    configure_guards,
)
from mp_guard.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GuardSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_guards",
]

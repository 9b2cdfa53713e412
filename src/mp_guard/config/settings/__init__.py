"""Config settings – 12-factor env-based configuration."""
from mp_guard.config.settings.base import Settings
from mp_guard.config.settings.guard import GuardSettings, configure_guards
from mp_guard.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GuardSettings",
    "Settings",
    "SettingsLoader",
    "configure_guards",
]

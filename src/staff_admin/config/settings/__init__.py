"""Config settings – env-based configuration of the staff admin service."""
from staff_admin.config.settings.base import Settings, StaffAdminSettings
from staff_admin.config.settings.factory import SettingsFactory, load_settings
from staff_admin.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "StaffAdminSettings",
    "load_settings",
]

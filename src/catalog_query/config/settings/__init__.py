"""Config settings – 12-factor env-based configuration."""
from catalog_query.config.settings.base import Settings
from catalog_query.config.settings.factory import SettingsFactory
from catalog_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from catalog_query.config.settings.query import QuerySettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "QuerySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]

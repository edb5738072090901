"""Utility functions for supercast."""

from supercast.utils.config import (
    ClientSettings,
    ConfigError,
    load_and_resolve_config,
    load_config_from_module,
    load_settings,
    resolve_config_inheritance,
)
from supercast.utils.env import getenv_number, load_env_file_if_present

__all__ = [
    "load_env_file_if_present",
    "getenv_number",
    "load_config_from_module",
    "load_and_resolve_config",
    "load_settings",
    "resolve_config_inheritance",
    "ClientSettings",
    "ConfigError",
]

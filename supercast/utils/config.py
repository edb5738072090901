"""Client configuration loaded from Python modules via importlib.

Connection settings live in named profiles inside a ``CONFIGURATION`` dict
(by default ``configs/api_profiles.py``). A profile can extend another one
with the ``"__inherits__"`` key, and a handful of ``SUPERCAST_*`` environment
variables override the selected profile.
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass, fields
from typing import Any

from supercast.utils.env import getenv_number, load_env_file_if_present

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "production"
DEFAULT_CONFIG_MODULE = "configs.api_profiles"


class ConfigError(Exception):
    """Raised when configuration loading or resolution fails."""

    pass


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings used by the API requestor."""

    api_base: str = "https://supercast.com"
    api_version: str = "v1"
    timeout: float = 30.0
    max_retries: int = 3
    backoff: float = 0.5

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> ClientSettings:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown client settings: {', '.join(unknown)}")
        return cls(**values)


def load_config_from_module(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> Any:
    """Return attribute ``config_name`` of the module at ``module_path``.

    Falls back to ``default`` when the module cannot be imported or lacks the
    attribute.

    Examples:
        >>> profiles = load_config_from_module("configs.api_profiles")
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        logger.warning(f"Could not import module '{module_path}': {e}")
        return default

    if not hasattr(module, config_name):
        logger.warning(f"Module '{module_path}' does not have attribute '{config_name}'")
        return default

    logger.debug(f"Loaded configuration from {module_path}.{config_name}")
    return getattr(module, config_name)


def resolve_config_inheritance(config_dict: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Resolve ``"__inherits__"`` links between named configurations.

    Args:
        config_dict: Mapping of profile name to settings, possibly inheriting

    Returns:
        Mapping of profile name to fully expanded settings

    Raises:
        ConfigError: If inheritance is circular or a parent is missing

    Examples:
        >>> resolved = resolve_config_inheritance({
        ...     "production": {"api_base": "https://supercast.com", "timeout": 30},
        ...     "staging": {"__inherits__": "production", "api_base": "https://staging.supercast.com"},
        ... })
        >>> resolved["staging"]["timeout"]
        30
    """
    resolved_configs: dict[str, dict[str, Any]] = {}

    def _resolve_single(name: str, chain: tuple[str, ...]) -> dict[str, Any]:
        if name in chain:
            path = " -> ".join((*chain, name))
            raise ConfigError(f"Circular inheritance detected: {path}")
        if name in resolved_configs:
            return resolved_configs[name]

        config = config_dict[name]
        parent_name = config.get("__inherits__")
        if parent_name is None:
            resolved = dict(config)
        else:
            if parent_name not in config_dict:
                raise ConfigError(
                    f"Configuration '{name}' inherits from '{parent_name}', "
                    f"but '{parent_name}' not found"
                )
            resolved = dict(_resolve_single(parent_name, (*chain, name)))
            resolved.update({k: v for k, v in config.items() if k != "__inherits__"})
            logger.debug(f"Resolved inheritance for '{name}' from '{parent_name}'")

        resolved_configs[name] = resolved
        return resolved

    for name in config_dict:
        _resolve_single(name, ())

    return resolved_configs


def load_and_resolve_config(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: dict[str, dict[str, Any]] | None = None,
) -> dict[str, dict[str, Any]]:
    """Load profiles from a module and resolve their inheritance."""
    raw_config = load_config_from_module(module_path, config_name, default)

    if not isinstance(raw_config, dict):
        logger.warning(f"Invalid configuration loaded from {module_path}, using default")
        return default or {}

    resolved = resolve_config_inheritance(raw_config)
    logger.info(f"Loaded and resolved {len(resolved)} configurations from {module_path}")
    return resolved


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    api_base = os.getenv("SUPERCAST_API_BASE")
    if api_base:
        overrides["api_base"] = api_base.rstrip("/")
    timeout = getenv_number("SUPERCAST_TIMEOUT", float)
    if timeout is not None:
        overrides["timeout"] = timeout
    max_retries = getenv_number("SUPERCAST_MAX_RETRIES", int)
    if max_retries is not None:
        overrides["max_retries"] = max_retries
    return overrides


def load_settings(
    profile: str | None = None,
    module_path: str = DEFAULT_CONFIG_MODULE,
    dotenv: bool = True,
) -> ClientSettings:
    """Build :class:`ClientSettings` for a named profile.

    The profile is taken from the argument, then ``SUPERCAST_PROFILE``, then
    ``"production"``. When the config module is unavailable only the built-in
    defaults and environment overrides apply.

    Raises:
        ConfigError: If the profile is explicitly requested but not configured
    """
    if dotenv:
        load_env_file_if_present()

    explicit = profile or os.getenv("SUPERCAST_PROFILE")
    name = explicit or DEFAULT_PROFILE
    profiles = load_and_resolve_config(module_path, default={})

    if name in profiles:
        values = dict(profiles[name])
    elif explicit:
        available = ", ".join(profiles) or "none"
        raise ConfigError(f"Profile '{name}' not found. Available profiles: {available}")
    else:
        values = {}

    values.update(_env_overrides())
    return ClientSettings.from_dict(values)

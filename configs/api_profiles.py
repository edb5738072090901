"""Supercast API connection profiles.

This module defines the CONFIGURATION dict which maps profile names to the
settings accepted by ``supercast.utils.config.ClientSettings``:
``api_base``, ``api_version``, ``timeout``, ``max_retries`` and ``backoff``.

Example usage:
    from supercast.utils import load_settings

    settings = load_settings("staging")

Environment overrides:
    export SUPERCAST_PROFILE=staging
    export SUPERCAST_API_BASE=http://localhost:3000
    export SUPERCAST_TIMEOUT=10

Configuration inheritance:
    "staging": {
        "__inherits__": "production",  # Inherits retries, timeout, version
        "api_base": "https://staging.supercast.com",
    }
"""

from __future__ import annotations

import os

CONFIGURATION = {
    "production": {
        "api_base": "https://supercast.com",
        "api_version": "v1",
        "timeout": 30.0,
        "max_retries": 3,
        "backoff": 0.5,
    },
    "staging": {
        "__inherits__": "production",
        "api_base": os.getenv("SUPERCAST_STAGING_URL", "https://staging.supercast.com"),
    },
    # Local API server, no retries so failures surface immediately
    "local": {
        "__inherits__": "production",
        "api_base": "http://localhost:3000",
        "timeout": 5.0,
        "max_retries": 0,
    },
}

from __future__ import annotations

import os

from supercast.errors import AuthenticationError
from supercast.utils.env import load_env_file_if_present

API_KEY_ENV = "SUPERCAST_API_KEY"


def load_api_key(env_key: str = API_KEY_ENV, dotenv: bool = True) -> str:
    """Return the Supercast API key from environment or .env.

    Raises AuthenticationError if missing.
    """
    if dotenv:
        load_env_file_if_present()
    api_key = os.getenv(env_key)
    if not api_key:
        raise AuthenticationError(
            f"No API key provided. Set {env_key} in environment or .env, "
            "or pass api_key in the request context."
        )
    return api_key


def build_auth_headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"}

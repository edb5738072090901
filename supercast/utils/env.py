from __future__ import annotations

import os
from pathlib import Path


def _parse_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    if line.startswith("export "):
        line = line[len("export ") :]
    key, value = line.split("=", 1)
    return key.strip(), value.strip().strip('"').strip("'")


def load_env_file_if_present(path: str | Path = ".env", override: bool = False) -> dict[str, str]:
    """Load KEY=VALUE pairs from a .env file into ``os.environ`` if the file exists.

    Keeps the API key out of source without depending on python-dotenv.
    Existing environment variables win unless ``override`` is set.

    Returns the key-values read from the file.
    """
    env_path = Path(path)
    loaded: dict[str, str] = {}
    if not env_path.exists():
        return loaded

    for raw in env_path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        if override:
            os.environ[key] = value
        else:
            os.environ.setdefault(key, value)
        loaded[key] = value
    return loaded


def getenv_number(key: str, cast: type[int] | type[float]) -> int | float | None:
    """Return ``os.environ[key]`` converted with ``cast``, or None when unset or blank."""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"Environment variable {key} must be a number, got {raw!r}") from e

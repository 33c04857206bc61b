from __future__ import annotations

import os
from pathlib import Path

ENV_FILE_VAR = "INFORM_DIRECT_ENV_FILE"


def resolve_env_file(path: str | Path | None = None) -> Path:
    """Return the .env path to load: explicit arg, then $INFORM_DIRECT_ENV_FILE, then ./.env."""
    if path is not None:
        return Path(path)
    explicit = os.getenv(ENV_FILE_VAR, "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return Path(".env")


def load_env_file_if_present(
    path: str | Path | None = None, override: bool = False
) -> dict[str, str]:
    """Load simple KEY=VALUE pairs from a .env file if present.

    Keeps the client free of a python-dotenv dependency while supporting
    the usual case of API keys stored in `.env`.

    Returns a dict of the key-values read from the file. os.environ is only
    updated for keys that are not already set, unless `override` is True.
    Lines starting with '#' are ignored, an optional `export ` prefix is
    stripped, and quoted values are unquoted.
    """
    env_path = resolve_env_file(path)
    loaded: dict[str, str] = {}
    if not env_path.exists():
        return loaded

    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        value = value.strip().strip('"').strip("'")
        if override or key not in os.environ:
            os.environ[key] = value
        loaded[key] = value
    return loaded

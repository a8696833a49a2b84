"""
Environment helpers.

`load_dotenv_if_present()` loads a `.env` file once (from `GEOCOORDS_ENV_FILE`, or the
current working directory) without overriding variables already set in the process.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    explicit = os.getenv("GEOCOORDS_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
    else:
        env_path = Path.cwd() / ".env"

    if env_path.is_file():
        load_dotenv(dotenv_path=env_path, override=False)
        return env_path
    return None

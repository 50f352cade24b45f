"""Runtime configuration for jsonreply, read from the environment and ``.env``."""
from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

# Load .env file from the working directory (if it exists)
load_dotenv()

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(raw: str | None, *, default: bool = False) -> bool:
    """Interpret an environment flag; unset means ``default``."""
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _parse_int(raw: str | None, *, default: int) -> int:
    """Interpret an integer setting; blank or malformed values fall back to ``default``."""
    try:
        return int(raw) if raw and raw.strip() else default
    except ValueError:
        return default


def _env_bool(name: str, *, default: bool = False) -> bool:
    return _parse_bool(os.environ.get(name), default=default)


def _env_int(name: str, *, default: int) -> int:
    return _parse_int(os.environ.get(name), default=default)


CONTENT_TYPE: Final[str] = "application/json; charset=UTF-8"

ENSURE_ASCII: Final[bool] = _env_bool("JSONREPLY_ENSURE_ASCII")
ESCAPE_HTML: Final[bool] = _env_bool("JSONREPLY_ESCAPE_HTML")
TRAILING_NEWLINE: Final[bool] = _env_bool("JSONREPLY_TRAILING_NEWLINE")

DEFAULT_HOST: Final[str] = os.environ.get("JSONREPLY_HOST", "").strip() or "127.0.0.1"
DEFAULT_PORT: Final[int] = _env_int("JSONREPLY_PORT", default=8080)


__all__ = [
    "CONTENT_TYPE",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ENSURE_ASCII",
    "ESCAPE_HTML",
    "TRAILING_NEWLINE",
]

"""Configuration helpers backed by environment variables.

Variables defined in a project-level ``.env`` file are loaded once before the
first lookup, so consumers should use :func:`get_env` instead of reading
:data:`os.environ` directly. Values already present in the process
environment win over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DESCENDANT_LIMIT = 1000
DEFAULT_ANCESTOR_LIMIT = 50000

_DISABLED = {"", "none", "off"}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load ``.env`` from the repository root, falling back to dotenv discovery."""

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment, or ``default``."""

    _load_environment()
    return os.environ.get(key, default)


def _parse_limit(key: str, raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in _DISABLED:
        return None
    try:
        value = int(text)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class QueryLimits:
    """Size guards applied before expensive queries.

    ``descendant_limit`` decides when a single-person view drops its
    descendant half. ``ancestor_limit`` refuses common-ancestry queries whose
    ancestor cones are larger than the limit. ``None`` disables a guard.
    """

    descendant_limit: Optional[int] = DEFAULT_DESCENDANT_LIMIT
    ancestor_limit: Optional[int] = DEFAULT_ANCESTOR_LIMIT

    @classmethod
    def from_env(cls) -> "QueryLimits":
        return cls(
            descendant_limit=_parse_limit(
                "KINGRAPH_DESCENDANT_LIMIT",
                get_env("KINGRAPH_DESCENDANT_LIMIT"),
                DEFAULT_DESCENDANT_LIMIT,
            ),
            ancestor_limit=_parse_limit(
                "KINGRAPH_ANCESTOR_LIMIT",
                get_env("KINGRAPH_ANCESTOR_LIMIT"),
                DEFAULT_ANCESTOR_LIMIT,
            ),
        )


__all__ = ["DEFAULT_ANCESTOR_LIMIT", "DEFAULT_DESCENDANT_LIMIT", "QueryLimits", "get_env"]

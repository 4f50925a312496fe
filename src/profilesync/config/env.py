"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import InvalidSettingError


def optional_env_var(name: str) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def optional_env_seconds(name: str) -> float | None:
    """Return a positive duration in seconds, or ``None`` when unset."""

    value = optional_env_var(name)
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError as exc:
        raise InvalidSettingError(name, value, "expected a number of seconds") from exc
    if seconds <= 0:
        raise InvalidSettingError(name, value, "must be positive")
    return seconds

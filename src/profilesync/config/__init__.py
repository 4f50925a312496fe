"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_seconds, optional_env_var
from .errors import ConfigurationError, InvalidSettingError
from .logging import configure_logging
from .nix import NixConfig, ProfileConfig, current_system, get_nix_config, get_profile_config

__all__ = [
    "ConfigurationError",
    "InvalidSettingError",
    "NixConfig",
    "ProfileConfig",
    "configure_logging",
    "current_system",
    "get_nix_config",
    "get_profile_config",
    "optional_env_seconds",
    "optional_env_var",
]

"""Nix invocation and target profile settings."""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .env import optional_env_seconds, optional_env_var
from .errors import ConfigurationError

DEFAULT_NIX_BINARY: Final[str] = "nix"
DEFAULT_EXPERIMENTAL_FEATURES: Final[tuple[str, ...]] = ("nix-command", "flakes")
PROFILE_SUBPATH: Final[Path] = Path(".profilesync") / "nix" / "profile" / "default"
DEFAULT_STORE_DIR: Final[str] = "/nix/store"

_MACHINE_ALIASES: Final[dict[str, str]] = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "i686",
    "i686": "i686",
    "armv7l": "armv7l",
    "riscv64": "riscv64",
}
_KERNEL_ALIASES: Final[dict[str, str]] = {
    "linux": "linux",
    "darwin": "darwin",
}


def current_system() -> str:
    """Return the Nix system double (``x86_64-linux``, ...) for this host."""

    machine = platform.machine().lower()
    kernel = platform.system().lower()
    arch = _MACHINE_ALIASES.get(machine)
    os_name = _KERNEL_ALIASES.get(kernel)
    if arch is None or os_name is None:
        raise ConfigurationError(
            f"Unsupported platform {machine}/{kernel}; set PROFILESYNC_SYSTEM explicitly"
        )
    return f"{arch}-{os_name}"


@dataclass(frozen=True, slots=True)
class NixConfig:
    """How the ``nix`` command line is invoked."""

    nix_binary: str = DEFAULT_NIX_BINARY
    experimental_features: tuple[str, ...] = field(default=DEFAULT_EXPERIMENTAL_FEATURES)
    timeout_seconds: float | None = None

    def base_command(self) -> list[str]:
        command = [self.nix_binary]
        if self.experimental_features:
            command += ["--extra-experimental-features", " ".join(self.experimental_features)]
        return command


@dataclass(frozen=True, slots=True)
class ProfileConfig:
    """Which flake is evaluated and which profile it is synced into."""

    flake_dir: Path
    profile_path: Path
    system: str
    store_dir: str = DEFAULT_STORE_DIR

    @property
    def flake_ref(self) -> str:
        return str(self.flake_dir.expanduser().resolve())


def get_nix_config() -> NixConfig:
    return NixConfig(
        nix_binary=optional_env_var("NIX_BIN") or DEFAULT_NIX_BINARY,
        timeout_seconds=optional_env_seconds("PROFILESYNC_NIX_TIMEOUT"),
    )


def get_profile_config(
    *,
    flake_dir: Path | None = None,
    profile_path: Path | None = None,
    system: str | None = None,
) -> ProfileConfig:
    """Build the profile settings, preferring explicit values over the environment."""

    env_flake = optional_env_var("PROFILESYNC_FLAKE_DIR")
    resolved_flake = flake_dir or (Path(env_flake) if env_flake else Path.cwd())

    env_profile = optional_env_var("PROFILESYNC_PROFILE")
    resolved_profile = profile_path or (
        Path(env_profile) if env_profile else resolved_flake / PROFILE_SUBPATH
    )

    resolved_system = system or optional_env_var("PROFILESYNC_SYSTEM") or current_system()
    store_dir = (optional_env_var("NIX_STORE_DIR") or DEFAULT_STORE_DIR).rstrip("/") or "/"

    return ProfileConfig(
        flake_dir=resolved_flake.expanduser().resolve(),
        profile_path=resolved_profile.expanduser().resolve(),
        system=resolved_system,
        store_dir=store_dir,
    )

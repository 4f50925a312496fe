"""Ports for inspecting and mutating a package profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@runtime_checkable
class InstalledItem(Protocol):
    """One profile slot; may resolve to several store paths (multi-output)."""

    def store_paths(self) -> list[str]: ...


class ProfileInspector(Protocol):
    def list_installed(self, profile_path: Path) -> Sequence[InstalledItem]: ...


@dataclass(slots=True, frozen=True, kw_only=True)
class InstallOptions:
    """Per-install settings handed to the install primitive."""

    offline: bool
    display_name: str
    step_label: str
    progress: TextIO


class ProfileMutator(Protocol):
    def remove(self, profile_path: Path, store_paths: Sequence[str]) -> None: ...

    def install(
        self,
        profile_path: Path,
        store_path: str,
        *,
        options: InstallOptions,
    ) -> None: ...


@dataclass(slots=True, frozen=True)
class Profile:
    """Opaque handle on an external profile.

    Only the path and the capabilities to act on it are held here; the
    profile's contents are never mirrored in memory.
    """

    path: Path
    inspector: ProfileInspector
    mutator: ProfileMutator

    def list_installed(self) -> Sequence[InstalledItem]:
        return self.inspector.list_installed(self.path)

    def remove(self, store_paths: Sequence[str]) -> None:
        self.mutator.remove(self.path, store_paths)

    def install(self, store_path: str, *, options: InstallOptions) -> None:
        self.mutator.install(self.path, store_path, options=options)


__all__ = [
    "InstallOptions",
    "InstalledItem",
    "Profile",
    "ProfileInspector",
    "ProfileMutator",
]

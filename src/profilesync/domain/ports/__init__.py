"""Domain port definitions for adapters."""

from __future__ import annotations

from .evaluation import DesiredSetProvider
from .profile import InstalledItem, InstallOptions, Profile, ProfileInspector, ProfileMutator

__all__ = [
    "DesiredSetProvider",
    "InstallOptions",
    "InstalledItem",
    "Profile",
    "ProfileInspector",
    "ProfileMutator",
]

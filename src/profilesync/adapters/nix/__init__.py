"""Public interface for the nix command line adapter."""

from __future__ import annotations

from .evaluator import NixFlakeEvaluator, build_inputs_attr
from .profile import NixProfile, ProfileListError
from .runner import NixCommandError, NixRunner
from .schema import ProfileElement, ProfileManifest

__all__ = [
    "NixCommandError",
    "NixFlakeEvaluator",
    "NixProfile",
    "NixRunner",
    "ProfileElement",
    "ProfileListError",
    "ProfileManifest",
    "build_inputs_attr",
]

"""Profile inspector and mutator backed by ``nix profile``."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .runner import NixRunner
from .schema import ProfileElement, ProfileManifest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from profilesync.domain.ports.profile import InstallOptions

log = getLogger(__name__)


class ProfileListError(RuntimeError):
    """Raised when ``nix profile list --json`` output cannot be understood."""


@dataclass(slots=True)
class NixProfile:
    runner: NixRunner = field(default_factory=NixRunner)

    def list_installed(self, profile_path: Path) -> list[ProfileElement]:
        output = self.runner.run(["profile", "list", "--json", "--profile", str(profile_path)])
        try:
            manifest = ProfileManifest.model_validate_json(output)
        except ValidationError as exc:
            raise ProfileListError(f"unexpected profile listing for {profile_path}: {exc}") from exc
        return manifest.elements

    def remove(self, profile_path: Path, store_paths: Sequence[str]) -> None:
        if not store_paths:
            return
        self.runner.run(["profile", "remove", "--profile", str(profile_path), *store_paths])

    def install(self, profile_path: Path, store_path: str, *, options: InstallOptions) -> None:
        args = ["profile", "install", "--profile", str(profile_path)]
        if options.offline:
            args.append("--offline")
        args.append(store_path)

        options.progress.write(f"{options.step_label}\n")
        log.debug("Installing %s (%s)", options.display_name, store_path)
        self.runner.run(args, stderr_sink=options.progress)
        options.progress.write(f"{options.step_label}: Success\n")


__all__ = ["NixProfile", "ProfileListError"]

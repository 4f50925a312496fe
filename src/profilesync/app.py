"""Application orchestration entry points."""

from __future__ import annotations

import sys
from logging import getLogger
from typing import TYPE_CHECKING

from profilesync.adapters.nix import NixFlakeEvaluator, NixProfile, NixRunner
from profilesync.config import get_nix_config, get_profile_config
from profilesync.domain.ports.profile import Profile
from profilesync.domain.reconciliation import ProfileReconciler, SyncResult

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from profilesync.config import NixConfig, ProfileConfig
    from profilesync.domain.ports import (
        DesiredSetProvider,
        ProfileInspector,
        ProfileMutator,
    )

log = getLogger(__name__)


def build_reconciler(
    profile_config: ProfileConfig,
    *,
    nix_config: NixConfig | None = None,
    evaluate: DesiredSetProvider | None = None,
    inspector: ProfileInspector | None = None,
    mutator: ProfileMutator | None = None,
) -> ProfileReconciler:
    """Wire the nix adapters (or the given overrides) into a reconciler."""

    runner = NixRunner(nix_config or get_nix_config())
    nix_profile = NixProfile(runner)
    profile = Profile(
        path=profile_config.profile_path,
        inspector=inspector or nix_profile,
        mutator=mutator or nix_profile,
    )
    return ProfileReconciler(
        evaluate=evaluate or NixFlakeEvaluator(runner),
        profile=profile,
        system=profile_config.system,
        store_dir=profile_config.store_dir,
    )


def sync_profile(
    *,
    flake_dir: Path | None = None,
    profile_path: Path | None = None,
    system: str | None = None,
    dry_run: bool = False,
    progress: TextIO | None = None,
    reconciler: ProfileReconciler | None = None,
) -> SyncResult:
    """Sync the profile with the build inputs of the flake's default dev shell."""

    profile_config = get_profile_config(
        flake_dir=flake_dir,
        profile_path=profile_path,
        system=system,
    )
    effective_reconciler = reconciler or build_reconciler(profile_config)
    if not dry_run:
        # nix creates the profile link and lock file but not their directory.
        profile_config.profile_path.parent.mkdir(parents=True, exist_ok=True)
    log.info(
        "Starting profile sync: flake=%s, profile=%s, system=%s, dry_run=%s",
        profile_config.flake_ref,
        profile_config.profile_path,
        profile_config.system,
        dry_run,
    )
    return effective_reconciler.reconcile(
        profile_config.flake_ref,
        progress=progress or sys.stderr,
        dry_run=dry_run,
    )

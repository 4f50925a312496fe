"""Orchestrator for one profile reconciliation run.

The reconciler composes the port interfaces but does not prescribe concrete
adapters. Desired and actual state are fetched fresh on every run; the
computed delta is consumed immediately and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from profilesync.domain.store_path import DEFAULT_STORE_DIR, InvalidStorePathError, StorePath

from .apply import ApplyResult, apply_delta
from .diff import StorePathDelta, diff_store_paths
from .errors import EvaluationError, InspectionError

if TYPE_CHECKING:
    from typing import TextIO

    from profilesync.domain.ports.evaluation import DesiredSetProvider
    from profilesync.domain.ports.profile import Profile

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SyncPlan:
    """Desired and actual store paths together with the delta between them."""

    want: tuple[StorePath, ...]
    got: tuple[StorePath, ...]
    delta: StorePathDelta


@dataclass(slots=True, frozen=True)
class SyncResult:
    plan: SyncPlan
    applied: ApplyResult | None = None

    @property
    def dry_run(self) -> bool:
        return self.applied is None


@dataclass(slots=True)
class ProfileReconciler:
    """Bring ``profile`` in line with the environment evaluated for ``system``."""

    evaluate: DesiredSetProvider
    profile: Profile
    system: str
    store_dir: str = DEFAULT_STORE_DIR

    def plan(self, flake_ref: str) -> SyncPlan:
        """Fetch desired and actual state and diff them without side effects."""

        want = self._desired(flake_ref)
        got = self._installed()
        delta = diff_store_paths(got, want)
        log.info(
            "Planned sync of %s: want=%d, got=%d, add=%d, remove=%d",
            self.profile.path,
            len(want),
            len(got),
            len(delta.add),
            len(delta.remove),
        )
        return SyncPlan(want=want, got=got, delta=delta)

    def reconcile(
        self,
        flake_ref: str,
        *,
        progress: TextIO,
        dry_run: bool = False,
    ) -> SyncResult:
        """Plan and, unless ``dry_run``, apply the delta to the profile."""

        plan = self.plan(flake_ref)
        if dry_run:
            return SyncResult(plan=plan)
        applied = apply_delta(plan.delta, self.profile, progress=progress)
        log.info(
            "Finished sync of %s: removed=%d, installed=%d",
            self.profile.path,
            len(applied.removed),
            len(applied.installed),
        )
        return SyncResult(plan=plan, applied=applied)

    def _desired(self, flake_ref: str) -> tuple[StorePath, ...]:
        try:
            raw_paths = self.evaluate(flake_ref=flake_ref, system=self.system)
        except Exception as exc:
            raise EvaluationError(f"nix eval devShells: {exc}") from exc

        if not isinstance(raw_paths, list):
            raise EvaluationError(
                f"unmarshal store paths: expected a list, got {type(raw_paths).__name__}"
            )
        paths: list[StorePath] = []
        for raw in raw_paths:
            if not isinstance(raw, str):
                raise EvaluationError(f"unmarshal store paths: {raw!r} is not a string")
            try:
                paths.append(StorePath.parse(raw, store_dir=self.store_dir))
            except InvalidStorePathError as exc:
                raise EvaluationError(f"unmarshal store paths: {exc}") from exc
        return tuple(paths)

    def _installed(self) -> tuple[StorePath, ...]:
        try:
            items = self.profile.list_installed()
        except Exception as exc:
            raise InspectionError(f"nix profile list: {exc}") from exc

        paths: list[StorePath] = []
        for item in items:
            try:
                raw_paths = item.store_paths()
                paths.extend(StorePath.parse(raw, store_dir=self.store_dir) for raw in raw_paths)
            except Exception as exc:
                raise InspectionError(f"nix profile list: {exc}") from exc
        return tuple(paths)


__all__ = ["ProfileReconciler", "SyncPlan", "SyncResult"]

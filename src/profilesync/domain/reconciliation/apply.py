"""Apply a store path delta to a profile.

Responsibilities of this stage:
- remove every stale store path in a single bulk call, before any install
- install new store paths one at a time, in delta order, offline only
- stop at the first failure and leave earlier installs in place

There is no rollback: a failed run leaves the profile partially converged
and the next run picks up from there.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from profilesync.domain.ports.profile import InstallOptions

from .errors import InstallError, RemovalError

if TYPE_CHECKING:
    from typing import TextIO

    from profilesync.domain.ports.profile import Profile
    from profilesync.domain.store_path import StorePath

    from .diff import StorePathDelta

log = getLogger(__name__)


@dataclass(slots=True)
class ApplyResult:
    """Store paths actually removed from and installed into the profile."""

    removed: list[StorePath] = field(default_factory=list["StorePath"])
    installed: list[StorePath] = field(default_factory=list["StorePath"])


def removal_message(store_paths: tuple[StorePath, ...]) -> str:
    labels = ", ".join(store_path.label for store_path in store_paths)
    if len(store_paths) == 1:
        return f"Removing {labels}"
    return f"Removing packages: {labels}"


def step_label(step: int, total: int, store_path: StorePath) -> str:
    return f"[{step}/{total}] {store_path.label}"


def apply_delta(delta: StorePathDelta, profile: Profile, *, progress: TextIO) -> ApplyResult:
    """Converge ``profile`` by applying ``delta``; raises on the first failure."""

    result = ApplyResult()

    if delta.remove:
        progress.write(removal_message(delta.remove) + "\n")
        paths = [store_path.path for store_path in delta.remove]
        try:
            profile.remove(paths)
        except Exception as exc:
            raise RemovalError(exc, store_paths=paths) from exc
        result.removed.extend(delta.remove)
        log.debug("Removed %d store paths from %s", len(paths), profile.path)

    total = len(delta.add)
    for step, store_path in enumerate(delta.add, start=1):
        options = InstallOptions(
            # Inputs are realised locally by evaluation; no substituter lookups.
            offline=True,
            display_name=store_path.name,
            step_label=step_label(step, total, store_path),
            progress=progress,
        )
        try:
            profile.install(store_path.path, options=options)
        except Exception as exc:
            raise InstallError(store_path.path, exc) from exc
        result.installed.append(store_path)
        log.debug("Installed %s into %s", store_path, profile.path)

    return result


__all__ = ["ApplyResult", "apply_delta", "removal_message", "step_label"]

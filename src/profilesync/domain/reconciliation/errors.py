"""Error kinds raised while reconciling a profile.

Every error names the failed operation so it can be shown verbatim to an
operator, and is raised ``from`` the underlying cause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ReconciliationError(RuntimeError):
    """Base class for fatal reconciliation failures."""


class EvaluationError(ReconciliationError):
    """The desired set could not be computed; nothing was mutated."""


class InspectionError(ReconciliationError):
    """The current profile contents could not be listed; nothing was mutated."""


class RemovalError(ReconciliationError):
    """The bulk removal failed; no install was attempted."""

    def __init__(self, reason: object, *, store_paths: Sequence[str]) -> None:
        super().__init__(f"nix profile remove: {reason}")
        self.store_paths = tuple(store_paths)


class InstallError(ReconciliationError):
    """Installing one store path failed; later installs were skipped."""

    def __init__(self, store_path: str, reason: object) -> None:
        super().__init__(f"error installing package {store_path}: {reason}")
        self.store_path = store_path


__all__ = [
    "EvaluationError",
    "InspectionError",
    "InstallError",
    "ReconciliationError",
    "RemovalError",
]

"""Reconciliation of a package profile against a desired store path set.

Layered flow:
1) evaluate the environment into the desired store paths
2) list the store paths currently installed in the profile
3) diff both sets into an add/remove delta (pure)
4) apply the delta: one bulk removal, then sequential offline installs
"""

from __future__ import annotations

from .apply import ApplyResult, apply_delta
from .diff import StorePathDelta, diff_store_paths
from .errors import (
    EvaluationError,
    InspectionError,
    InstallError,
    ReconciliationError,
    RemovalError,
)
from .reconciler import ProfileReconciler, SyncPlan, SyncResult

__all__ = [
    "ApplyResult",
    "EvaluationError",
    "InspectionError",
    "InstallError",
    "ProfileReconciler",
    "ReconciliationError",
    "RemovalError",
    "StorePathDelta",
    "SyncPlan",
    "SyncResult",
    "apply_delta",
    "diff_store_paths",
]

"""Port for computing the desired set of store paths."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DesiredSetProvider(Protocol):
    """Evaluate an environment definition into the store paths it needs.

    Implementations return the decoded list of store path strings for the
    default environment of ``system`` and raise on any evaluation failure.
    """

    def __call__(self, *, flake_ref: str, system: str) -> list[str]: ...


__all__ = ["DesiredSetProvider"]

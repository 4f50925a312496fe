"""Pure computation of the add/remove delta between two store path sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from profilesync.domain.store_path import StorePath


@dataclass(slots=True, frozen=True)
class StorePathDelta:
    """Store paths to install and to uninstall; the two never overlap."""

    add: tuple[StorePath, ...] = ()
    remove: tuple[StorePath, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.add and not self.remove


def diff_store_paths(got: Iterable[StorePath], want: Iterable[StorePath]) -> StorePathDelta:
    """Return what must be added to and removed from ``got`` to reach ``want``.

    Duplicates in either input collapse, and each output keeps the relative
    order in which its members first appear in the corresponding input.
    """

    got_items = list(got)
    want_items = list(want)
    got_set = set(got_items)
    want_set = set(want_items)

    remove = _unique(path for path in got_items if path not in want_set)
    add = _unique(path for path in want_items if path not in got_set)
    return StorePathDelta(add=add, remove=remove)


def _unique(paths: Iterable[StorePath]) -> tuple[StorePath, ...]:
    return tuple(dict.fromkeys(paths))


__all__ = ["StorePathDelta", "diff_store_paths"]

"""Desired-set provider backed by ``nix eval``."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger

from pydantic import TypeAdapter

from .runner import NixRunner

log = getLogger(__name__)

_STORE_PATH_LIST = TypeAdapter(list[str])


def build_inputs_attr(flake_ref: str, system: str) -> str:
    return f"{flake_ref}#devShells.{system}.default.buildInputs"


@dataclass(slots=True)
class NixFlakeEvaluator:
    """Evaluate the build inputs of a flake's default dev shell.

    Evaluating the attribute realises every input in the local store.
    """

    runner: NixRunner = field(default_factory=NixRunner)

    def __call__(self, *, flake_ref: str, system: str) -> list[str]:
        attr = build_inputs_attr(flake_ref, system)
        output = self.runner.run(["eval", attr, "--json"])
        store_paths = _STORE_PATH_LIST.validate_json(output)
        log.debug("Evaluated %d build inputs from %s", len(store_paths), attr)
        return store_paths


__all__ = ["NixFlakeEvaluator", "build_inputs_attr"]

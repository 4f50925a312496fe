from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from profilesync.adapters.nix import NixCommandError, NixRunner

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO


@dataclass
class ScriptedRunner(NixRunner):
    """Runner returning canned stdout per leading subcommand, recording argv."""

    outputs: dict[str, str] = field(default_factory=dict)
    failures: dict[str, str] = field(default_factory=dict)
    commands: list[list[str]] = field(default_factory=list)
    stderr: dict[str, str] = field(default_factory=dict)
    sinks: list[TextIO | None] = field(default_factory=list)

    def run(self, args: Sequence[str], *, stderr_sink: TextIO | None = None) -> str:
        argv = list(args)
        self.commands.append(argv)
        self.sinks.append(stderr_sink)
        key = " ".join(argv[:2]) if argv[0] == "profile" else argv[0]
        if stderr_sink is not None and key in self.stderr:
            stderr_sink.write(self.stderr[key])
        if key in self.failures:
            raise NixCommandError(["nix", *argv], returncode=1, stderr=self.failures[key])
        return self.outputs.get(key, "")


@pytest.fixture
def scripted_runner() -> ScriptedRunner:
    return ScriptedRunner()

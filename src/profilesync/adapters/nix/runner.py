"""Subprocess runner for the ``nix`` command line.

The single place where ``subprocess.run`` is called. Commands are logged at
DEBUG level and every failure surfaces as :class:`NixCommandError`.
"""

from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from profilesync.config.nix import NixConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

log = getLogger(__name__)

_STDERR_TAIL_CHARS = 2000


class NixCommandError(RuntimeError):
    """Raised when a ``nix`` invocation cannot be run or exits non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        returncode: int | None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        detail = reason or _last_line(stderr) or f"exit status {returncode}"
        super().__init__(f"{' '.join(self.command)}: {detail}")


def _last_line(text: str) -> str:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return lines[-1] if lines else ""


@dataclass(slots=True)
class NixRunner:
    config: NixConfig = field(default_factory=NixConfig)

    def run(self, args: Sequence[str], *, stderr_sink: TextIO | None = None) -> str:
        """Run ``nix <args>`` and return its standard output.

        Captured standard error is copied to ``stderr_sink`` when one is given,
        whether or not the command succeeds.
        """

        command = [*self.config.base_command(), *args]
        log.debug("Executing: %s", " ".join(command))
        start = time.monotonic()
        try:
            result = subprocess.run(  # noqa: S603
                command,
                capture_output=True,
                text=True,
                timeout=self.config.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise NixCommandError(
                command,
                returncode=None,
                reason=f"timed out after {self.config.timeout_seconds}s",
            ) from exc
        except OSError as exc:
            raise NixCommandError(command, returncode=None, reason=str(exc)) from exc

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if stderr_sink is not None and result.stderr:
            stderr_sink.write(result.stderr)
        if result.returncode != 0:
            stderr = result.stderr[-_STDERR_TAIL_CHARS:] if result.stderr else ""
            log.debug("Command failed in %dms (exit %d)", elapsed_ms, result.returncode)
            raise NixCommandError(command, returncode=result.returncode, stderr=stderr)

        log.debug("Command finished in %dms", elapsed_ms)
        return result.stdout


__all__ = ["NixCommandError", "NixRunner"]

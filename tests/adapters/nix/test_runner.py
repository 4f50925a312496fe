from __future__ import annotations

import io
import subprocess
from typing import Any

import pytest

from profilesync.adapters.nix import NixCommandError, NixRunner
from profilesync.adapters.nix import runner as runner_module
from profilesync.config import NixConfig


def _fake_run(
    captured: dict[str, Any],
    *,
    returncode: int = 0,
    stdout: str = "",
    stderr: str = "",
):
    def fake_run(command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        captured["command"] = command
        captured.update(kwargs)
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)

    return fake_run


def test_run_prepends_binary_and_features(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr(runner_module.subprocess, "run", _fake_run(captured, stdout="[]"))

    output = NixRunner(NixConfig(nix_binary="/opt/nix/bin/nix", timeout_seconds=30.0)).run(
        ["eval", ".#x", "--json"]
    )

    assert output == "[]"
    assert captured["command"] == [
        "/opt/nix/bin/nix",
        "--extra-experimental-features",
        "nix-command flakes",
        "eval",
        ".#x",
        "--json",
    ]
    assert captured["timeout"] == 30.0
    assert captured["capture_output"] is True


def test_run_without_features(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}
    monkeypatch.setattr(runner_module.subprocess, "run", _fake_run(captured))

    NixRunner(NixConfig(experimental_features=())).run(["--version"])

    assert captured["command"] == ["nix", "--version"]


def test_non_zero_exit_raises_with_last_stderr_line(monkeypatch: pytest.MonkeyPatch) -> None:
    stderr = "warning: Git tree is dirty\nerror: attribute 'devShells' missing\n"
    monkeypatch.setattr(
        runner_module.subprocess,
        "run",
        _fake_run({}, returncode=1, stderr=stderr),
    )

    with pytest.raises(NixCommandError) as excinfo:
        NixRunner().run(["eval", ".#devShells"])

    assert excinfo.value.returncode == 1
    assert excinfo.value.stderr == stderr
    assert str(excinfo.value).endswith("error: attribute 'devShells' missing")


def test_non_zero_exit_without_stderr_mentions_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runner_module.subprocess, "run", _fake_run({}, returncode=3))

    with pytest.raises(NixCommandError, match="exit status 3"):
        NixRunner().run(["profile", "list"])


def test_timeout_raises_command_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(runner_module.subprocess, "run", fake_run)

    with pytest.raises(NixCommandError, match="timed out after 5.0s") as excinfo:
        NixRunner(NixConfig(timeout_seconds=5.0)).run(["profile", "install", "x"])

    assert excinfo.value.returncode is None


def test_missing_binary_raises_command_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise FileNotFoundError(2, "No such file or directory", command[0])

    monkeypatch.setattr(runner_module.subprocess, "run", fake_run)

    with pytest.raises(NixCommandError, match="No such file or directory"):
        NixRunner().run(["--version"])


def test_run_copies_stderr_to_sink(monkeypatch: pytest.MonkeyPatch) -> None:
    stderr = "copying path '/nix/store/...-hello-2.12.1' from 'file://'...\n"
    monkeypatch.setattr(runner_module.subprocess, "run", _fake_run({}, stderr=stderr))
    sink = io.StringIO()

    NixRunner().run(["profile", "install", "x"], stderr_sink=sink)

    assert sink.getvalue() == stderr


def test_run_copies_stderr_to_sink_before_raising(monkeypatch: pytest.MonkeyPatch) -> None:
    stderr = "error: cannot add path '/nix/store/...' because it lacks a signature\n"
    monkeypatch.setattr(
        runner_module.subprocess,
        "run",
        _fake_run({}, returncode=1, stderr=stderr),
    )
    sink = io.StringIO()

    with pytest.raises(NixCommandError, match="lacks a signature"):
        NixRunner().run(["profile", "install", "x"], stderr_sink=sink)

    assert sink.getvalue() == stderr

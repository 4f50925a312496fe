from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def profile_list_v2() -> str:
    return (DATA_DIR / "nix_profile_list_v2.json").read_text()


@pytest.fixture(scope="session")
def profile_list_v3() -> str:
    return (DATA_DIR / "nix_profile_list_v3.json").read_text()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "NIX_BIN",
        "PROFILESYNC_FLAKE_DIR",
        "PROFILESYNC_NIX_TIMEOUT",
        "PROFILESYNC_PROFILE",
        "PROFILESYNC_SYSTEM",
        "NIX_STORE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

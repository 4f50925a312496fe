"""Content-addressed store path identifiers.

A store path such as ``/nix/store/<digest>-hello-2.12.1`` uniquely names one
build artifact. Identity is the exact path string; the ``name``/``version``
decomposition is a lossy, display-only view used for progress labels.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Final

DEFAULT_STORE_DIR: Final[str] = "/nix/store"

# Output names that nix appends to a derivation's store path name.
KNOWN_OUTPUTS: Final[frozenset[str]] = frozenset(
    {"bin", "dev", "doc", "debug", "devdoc", "info", "lib", "man", "out", "static"}
)

_DIGEST_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9a-z]{32}$")


class InvalidStorePathError(ValueError):
    """Raised when a string cannot be decomposed as a store path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"invalid store path {path!r}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class StorePath:
    """One build artifact, compared and hashed by its exact path."""

    path: str
    digest: str = field(compare=False, repr=False)
    name: str = field(compare=False)
    version: str = field(compare=False)
    output: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, path: str, *, store_dir: str = DEFAULT_STORE_DIR) -> StorePath:
        digest, name, version, output = _split(path, store_dir=store_dir)
        return cls(path=path, digest=digest, name=name, version=version, output=output)

    @property
    def label(self) -> str:
        """Human-readable ``name@version`` label."""

        return f"{self.name}@{self.version}"

    def __str__(self) -> str:
        return self.path


def _split(path: str, *, store_dir: str) -> tuple[str, str, str, str | None]:
    pure = PurePosixPath(path)
    if str(pure.parent) != store_dir:
        raise InvalidStorePathError(path, f"not a direct child of {store_dir}")

    digest, sep, remainder = pure.name.partition("-")
    if not sep or not _DIGEST_PATTERN.match(digest):
        raise InvalidStorePathError(path, "missing or malformed digest")

    components = remainder.split("-")
    version_start = next(
        (
            index
            for index, component in enumerate(components)
            if index > 0 and component[:1].isdigit()
        ),
        None,
    )
    if version_start is None:
        name = remainder
        version_parts: list[str] = []
    else:
        name = "-".join(components[:version_start])
        version_parts = components[version_start:]

    output: str | None = None
    if len(version_parts) > 1 and version_parts[-1] in KNOWN_OUTPUTS:
        output = version_parts.pop()

    if not name:
        raise InvalidStorePathError(path, "empty package name")

    return digest, name, "-".join(version_parts), output


__all__ = ["DEFAULT_STORE_DIR", "InvalidStorePathError", "StorePath"]

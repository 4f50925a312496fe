"""Pydantic models describing ``nix profile list --json`` output."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NixBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProfileElement(NixBaseModel):
    """One profile slot. Multi-output packages carry several store paths."""

    name: str | None = None
    active: bool = True
    priority: int | None = None
    attr_path: str | None = Field(default=None, alias="attrPath")
    original_url: str | None = Field(default=None, alias="originalUrl")
    url: str | None = None
    outputs: list[str] | None = None
    paths: list[str] = Field(default_factory=list, alias="storePaths")

    def store_paths(self) -> list[str]:
        return list(self.paths)


class ProfileManifest(NixBaseModel):
    """Top-level listing; ``elements`` is a list before manifest version 3."""

    version: int
    elements: list[ProfileElement]

    @model_validator(mode="before")
    @classmethod
    def _normalize_named_elements(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        elements = mapping_value.get("elements")
        if not isinstance(elements, Mapping):
            return mapping_value
        named = cast(Mapping[str, object], elements)
        data: dict[str, object] = dict(mapping_value)
        data["elements"] = [
            {"name": name, **cast(Mapping[str, object], element)}
            if isinstance(element, Mapping)
            else element
            for name, element in named.items()
        ]
        return data


__all__ = ["NixBaseModel", "ProfileElement", "ProfileManifest"]

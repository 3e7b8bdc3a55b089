"""Pydantic schemas for runtime validation of converter inputs."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, field_validator


class ConverterConfig(BaseModel):
    """Validated, immutable index of candidate source map paths."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    map_paths: tuple[str, ...]

    @field_validator("map_paths", mode="before")
    @classmethod
    def _coerce_path_like(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(
                os.fspath(item) if isinstance(item, os.PathLike) else item
                for item in value
            )
        return value

    @field_validator("map_paths")
    @classmethod
    def _validate_map_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("map_paths must contain at least one path.")
        if any(not item.strip() for item in value):
            raise ValueError("map_paths cannot contain empty entries.")
        return value

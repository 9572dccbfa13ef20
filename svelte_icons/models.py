from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawIconEntry(BaseModel):
    """One dataset entry as published; everything except title/path is ignored."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    path: str | None = None

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.path)


class IconRecord(BaseModel):
    """Validated icon, the only shape the generator and manifest builder see."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    slug: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    path_data: str = Field(..., min_length=1)

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: str) -> str:
        if value != value.lower():
            raise ValueError("slug must be lowercase")
        if value != value.strip():
            raise ValueError("slug must not contain surrounding whitespace")
        return value

"""Configuration models for svcdocs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DocsSettings(BaseModel):
    """Global settings."""

    max_workers: int = Field(
        default=1, ge=1, description="Interfaces rendered in parallel (1 = sequential)"
    )


class DocsConfig(BaseModel):
    """Root configuration model."""

    output_dir: str = Field(default="docs", description="Directory for generated docs")
    banner: bool = Field(
        default=True, description="Prefix each document with a generated-file banner"
    )
    settings: DocsSettings = Field(default_factory=DocsSettings)

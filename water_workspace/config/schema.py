# water_workspace/config/schema.py
"""Pydantic schema for the workspace configuration."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkspaceConfig(BaseModel):
    """
    Validated workspace configuration.

    Every field has a packaged default (config/default.yaml), so a workspace
    without .water/config.yaml still gets a complete config.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    module_file: str = Field(default="water.yaml", description="Module marker / declaration file name")
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["exam", "build", "target", "bin", "src"],
        description="Directory names whose whole subtree is skipped by discovery",
    )
    address_separator: str = Field(default=":", min_length=1, description="Module address separator")
    build_dir: str = Field(default="build", description="Module build output directory")
    descriptor_dir: str = Field(default="water", description="Descriptor directory under build_dir")
    schema_version: str = Field(default="1.0", description="Descriptor schemaVersion marker")
    cache_file: str = Field(default="descriptor-cache.json", description="Cache file name under .water/")

    @field_validator("module_file", "build_dir", "descriptor_dir", "cache_file")
    @classmethod
    def _plain_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"must be a plain file or directory name, got {v!r}")
        return v


__all__ = ["WorkspaceConfig"]

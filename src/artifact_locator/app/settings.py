"""Locator settings — Pydantic BaseSettings for configuration from environment and .env."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from artifact_locator.application.conventions import DEFAULT_VEXIDE_TARGET_TRIPLE


class LocatorSettings(BaseSettings):
    """Code object discovery configuration.

    Values come from ``ARTIFACT_LOCATOR_*`` environment variables or a .env file.
    Custom fixed-path conventions can also be declared in a YAML catalog.
    """

    # Built-in conventions
    enable_vexide: bool = Field(default=True, description="Search cargo-v5 output under target/")
    enable_vexcode: bool = Field(default=True, description="Search VEXCode output under build/")
    vexide_target_triple: str = Field(
        default=DEFAULT_VEXIDE_TARGET_TRIPLE, min_length=1, description="Cargo target triple directory name"
    )

    # Custom conventions
    extra_paths: list[str] = Field(default_factory=list, description="Root-relative paths for the 'custom' convention")
    conventions_file: Path | None = Field(default=None, description="YAML catalog of name -> relative paths")

    # Concurrency
    max_concurrent_stats: int = Field(default=64, ge=1, le=1024, description="Upper bound on in-flight stat calls")

    model_config = {
        "env_prefix": "ARTIFACT_LOCATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("extra_paths")
    @classmethod
    def _paths_are_relative(cls, paths: list[str]) -> list[str]:
        for entry in paths:
            if not entry:
                raise ValueError("extra_paths entries must not be empty")
            if PurePosixPath(entry).is_absolute():
                raise ValueError(f"extra_paths entries must be relative to the project root: {entry!r}")
        return paths

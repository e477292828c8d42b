# folio/config/schema.py
"""
Configuration schema for folio.

Pydantic models for the merged configuration (package defaults +
workspace overrides). Unknown keys are rejected so typos surface early.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentConfig(BaseModel):
    """Where documents live and which files count as documents."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field(default="content", description="Default content directory")
    extensions: List[str] = Field(
        default_factory=lambda: [".md", ".markdown", ".mdx"],
        description="File extensions treated as content documents",
    )
    recursive: bool = Field(default=True, description="Descend into subdirectories")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extensions must not contain empty strings")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized


class ValidationConfig(BaseModel):
    """Acceptance-check tuning."""

    model_config = ConfigDict(extra="forbid")

    max_future_days: int = Field(
        default=365,
        ge=0,
        description="How far past today a publishDate may lie",
    )
    tag_case_insensitive: bool = Field(
        default=True,
        description="Treat tags differing only by case as duplicates",
    )
    require_description: bool = Field(
        default=False,
        description="Warn when a document has no description",
    )


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


class FolioConfig(BaseModel):
    """Top-level folio configuration."""

    model_config = ConfigDict(extra="forbid")

    content: ContentConfig = Field(default_factory=ContentConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "ContentConfig",
    "ValidationConfig",
    "LoggingConfig",
    "FolioConfig",
]

"""Application settings and configuration management."""

from __future__ import annotations

import os
from functools import cached_property, lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _default_base_dir() -> Path:
    """Determine the directory that holds the ``content/`` tree."""

    base_dir_env = os.getenv("PORTFOLIO_BASE_DIR") or os.getenv("BASE_DIR")
    if base_dir_env:
        return Path(base_dir_env).expanduser()

    return Path.cwd()


class AppPaths(BaseModel):
    """Resolved filesystem paths used by the application."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    base_dir: Path
    content_dir: Path
    projects_dir: Path


class Settings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=(".env",),
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Portfolio Content Service")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    log_level: str = Field(
        default="INFO",
        description="Logging level applied by the command line entry points.",
    )

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="List of origins permitted by CORS configuration.",
    )

    base_dir: Path = Field(
        default_factory=_default_base_dir,
        validation_alias=AliasChoices("PORTFOLIO_BASE_DIR", "BASE_DIR"),
        description="Root directory containing the content tree.",
    )
    content_dir: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("PORTFOLIO_CONTENT_DIR", "CONTENT_DIR"),
        description="Optional override for the content directory location.",
    )

    projects_subdir: str = Field(
        default="projects",
        description="Name of the projects sub-directory within the content directory.",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_allowed_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @cached_property
    def paths(self) -> AppPaths:
        base_dir = self.base_dir.expanduser().resolve()
        content_source = self.content_dir or (base_dir / "content")
        content_dir = Path(content_source).expanduser().resolve()
        projects_dir = (content_dir / self.projects_subdir).resolve()
        return AppPaths(
            base_dir=base_dir,
            content_dir=content_dir,
            projects_dir=projects_dir,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of application settings."""

    return Settings()

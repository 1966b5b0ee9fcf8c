"""Typed public and internal views of portfolio project records."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel


class ProjectStatus(StrEnum):
    """Lifecycle states governing where a project is visible."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class _RecordModel(BaseModel):
    """Frozen model reading and writing the camelCase keys used on disk."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ImageObject(_RecordModel):
    """Reference to an image asset with optional accessibility text."""

    url: StrictStr = Field(..., min_length=1, description="Location of the image")
    alt: StrictStr | None = Field(default=None, description="Alternative text")
    caption: StrictStr | None = Field(default=None, description="Caption shown with the image")


class Collaborator(_RecordModel):
    name: StrictStr
    role: StrictStr | None = None
    url: StrictStr | None = None


class Timeframe(_RecordModel):
    start: StrictStr | None = None
    end: StrictStr | None = None
    label: StrictStr | None = None


def _promote_image(value: Any) -> Any:
    if isinstance(value, str):
        return {"url": value}
    return value


class ProjectPublic(_RecordModel):
    """Fields of a project that are safe to hand to a renderer."""

    slug: StrictStr = Field(..., description="Canonical routing identifier")
    title: StrictStr = Field(..., description="Display title")
    summary: StrictStr = Field(..., description="Short description used in listings")
    intro: StrictStr | None = None
    body: StrictStr | None = Field(
        default=None, description="Long-form content, inline or from content.md"
    )
    hero_image: ImageObject | None = None
    gallery: tuple[ImageObject, ...] | None = None
    tags: tuple[StrictStr, ...] | None = None
    category: StrictStr | None = None
    tech: tuple[StrictStr, ...] | None = None
    featured: StrictBool | None = None
    weight: StrictInt | StrictFloat | None = None
    sort_date: StrictStr | None = None
    timeframe: Timeframe | None = None
    role: StrictStr | None = None
    collaborators: tuple[Collaborator, ...] | None = None
    client_public_name: StrictStr | None = None
    live_url: StrictStr | None = None
    repo_url: StrictStr | None = None
    canonical: StrictStr | None = None
    seo: dict[str, Any] | None = None

    @field_validator("hero_image", mode="before")
    @classmethod
    def _promote_hero_image(cls, value: Any) -> Any:
        return _promote_image(value)

    @field_validator("gallery", mode="before")
    @classmethod
    def _promote_gallery(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_promote_image(item) for item in value]
        return value


class ProjectInternal(_RecordModel):
    """Operational and editorial fields that are never exposed publicly."""

    id: StrictStr = Field(..., description="Stable identifier, independent of the slug")
    status: ProjectStatus
    created_at: StrictStr
    updated_at: StrictStr
    content_uri: StrictStr
    aliases: tuple[StrictStr, ...] = Field(
        default=(), description="Previously used slugs that redirect here"
    )
    internal_notes: StrictStr | None = None
    metadata: dict[str, Any] | None = None


class ProjectBundle(_RecordModel):
    """Public and internal views of one project under its canonical slug."""

    slug: StrictStr
    status: ProjectStatus
    public: ProjectPublic
    internal: ProjectInternal


class ProjectListResponse(BaseModel):
    """Container for listing multiple projects."""

    items: list[ProjectPublic] = Field(
        default_factory=list, description="Ordered collection of public project views"
    )

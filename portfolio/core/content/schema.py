"""Field names and path conventions of the on-disk project record format."""

from __future__ import annotations

from pathlib import PurePosixPath

METADATA_FILENAME = "project.json"
MARKDOWN_FILENAME = "content.md"
CONTENT_URI_ROOT = PurePosixPath("content", "projects")

REQUIRED_FIELDS: tuple[str, ...] = (
    "id",
    "slug",
    "title",
    "summary",
    "status",
    "createdAt",
    "updatedAt",
    "contentUri",
)

PUBLIC_FIELDS: tuple[str, ...] = (
    "slug",
    "title",
    "summary",
    "intro",
    "body",
    "heroImage",
    "gallery",
    "tags",
    "category",
    "tech",
    "featured",
    "weight",
    "sortDate",
    "timeframe",
    "role",
    "collaborators",
    "clientPublicName",
    "liveUrl",
    "repoUrl",
    "canonical",
    "seo",
)

INTERNAL_FIELDS: tuple[str, ...] = (
    "id",
    "status",
    "createdAt",
    "updatedAt",
    "contentUri",
    "aliases",
    "internalNotes",
    "metadata",
)

ALLOWED_FIELDS: frozenset[str] = frozenset(PUBLIC_FIELDS) | frozenset(INTERNAL_FIELDS)


def expected_content_uri(slug: str) -> str:
    """Return the only ``contentUri`` accepted for the project stored under *slug*."""

    return str(CONTENT_URI_ROOT / slug / MARKDOWN_FILENAME)


__all__ = [
    "METADATA_FILENAME",
    "MARKDOWN_FILENAME",
    "CONTENT_URI_ROOT",
    "REQUIRED_FIELDS",
    "PUBLIC_FIELDS",
    "INTERNAL_FIELDS",
    "ALLOWED_FIELDS",
    "expected_content_uri",
]

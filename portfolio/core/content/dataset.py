"""Aggregation of validated project bundles into an immutable dataset."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ...models.project import ProjectBundle, ProjectPublic, ProjectStatus
from .exceptions import (
    AliasConflictError,
    ContentError,
    DuplicateSlugError,
    MalformedRecordError,
    SelfAliasError,
)
from .records import parse_record
from .schema import MARKDOWN_FILENAME, METADATA_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectDataset:
    """All project bundles of one build plus their derived views."""

    projects: tuple[ProjectBundle, ...]
    published: tuple[ProjectPublic, ...]
    archived: tuple[ProjectPublic, ...]
    drafts: tuple[ProjectBundle, ...]
    redirects: Mapping[str, str]
    built_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def find_public(self, slug: str) -> ProjectPublic | None:
        """Return the public view of a published or archived project."""

        for project in (*self.published, *self.archived):
            if project.slug == slug:
                return project
        return None

    def resolve_redirect(self, slug: str) -> str | None:
        """Return the canonical slug an alias points to, if any."""

        return self.redirects.get(slug)

    def summary(self) -> dict[str, int]:
        return {
            "projects": len(self.projects),
            "published": len(self.published),
            "archived": len(self.archived),
            "drafts": len(self.drafts),
            "redirects": len(self.redirects),
        }


def assemble_dataset(bundles: Iterable[ProjectBundle]) -> ProjectDataset:
    """Check cross-record invariants and partition *bundles* by status.

    Aliases are registered first come, first served; any clash aborts.
    """

    seen_slugs: set[str] = set()
    alias_map: dict[str, str] = {}
    collected: list[ProjectBundle] = []

    for bundle in bundles:
        slug = bundle.slug
        if slug in seen_slugs:
            raise DuplicateSlugError(slug)
        seen_slugs.add(slug)

        for alias in bundle.internal.aliases:
            if alias == slug:
                raise SelfAliasError(slug)
            existing = alias_map.get(alias)
            if existing is not None and existing != slug:
                raise AliasConflictError(alias, existing, slug)
            alias_map[alias] = slug

        collected.append(bundle)

    return ProjectDataset(
        projects=tuple(collected),
        published=_public_views(collected, ProjectStatus.PUBLISHED),
        archived=_public_views(collected, ProjectStatus.ARCHIVED),
        drafts=tuple(b for b in collected if b.status == ProjectStatus.DRAFT),
        redirects=MappingProxyType(dict(alias_map)),
    )


def _public_views(
    bundles: Iterable[ProjectBundle], status: ProjectStatus
) -> tuple[ProjectPublic, ...]:
    return tuple(bundle.public for bundle in bundles if bundle.status == status)


class ProjectDatasetBuilder:
    """Read every project folder under *projects_dir* and assemble a dataset."""

    def __init__(self, projects_dir: Path) -> None:
        self._projects_dir = projects_dir

    @property
    def projects_dir(self) -> Path:
        return self._projects_dir

    def build(self) -> ProjectDataset:
        """Scan the content tree; any invalid record aborts the whole build."""

        start_time = time.perf_counter()
        self._log_event("content.build.start", projects_dir=str(self._projects_dir))
        try:
            dataset = assemble_dataset(self._load_bundles())
        except (ContentError, OSError) as exc:
            self._log_event(
                "content.build.failure",
                projects_dir=str(self._projects_dir),
                duration=time.perf_counter() - start_time,
                error=str(exc),
            )
            raise

        self._log_event(
            "content.build.success",
            projects_dir=str(self._projects_dir),
            duration=time.perf_counter() - start_time,
            **dataset.summary(),
        )
        return dataset

    def _load_bundles(self) -> Iterable[ProjectBundle]:
        for entry in sorted(self._projects_dir.iterdir(), key=lambda item: item.name):
            if not entry.is_dir():
                continue
            yield self._load_bundle(entry)

    def _load_bundle(self, project_dir: Path) -> ProjectBundle:
        source = project_dir.name
        metadata_text = (project_dir / METADATA_FILENAME).read_text(encoding="utf-8")
        markdown = (project_dir / MARKDOWN_FILENAME).read_text(encoding="utf-8")
        raw = self._parse_metadata(metadata_text, source)
        return parse_record(raw, source, markdown)

    @staticmethod
    def _parse_metadata(text: str, source: str) -> dict[str, Any]:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedRecordError(source, str(exc)) from exc
        if not isinstance(raw, dict):
            raise MalformedRecordError(source, f"expected an object, got {type(raw).__name__}")
        return raw

    @staticmethod
    def _log_event(action: str, **extra: Any) -> None:
        logger.info(action, extra=extra)


__all__ = ["ProjectDataset", "ProjectDatasetBuilder", "assemble_dataset"]

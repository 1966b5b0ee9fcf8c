"""Process-wide cache around the project dataset builder."""

from __future__ import annotations

import logging
from enum import StrEnum
from functools import lru_cache
from threading import Lock
from typing import Protocol

from ...models.project import ProjectPublic
from ..settings import get_settings
from .dataset import ProjectDataset, ProjectDatasetBuilder

logger = logging.getLogger(__name__)


class CacheState(StrEnum):
    """Lifecycle of the cached dataset."""

    UNINITIALIZED = "uninitialized"
    POPULATED = "populated"
    INVALIDATED = "invalidated"


class DatasetSource(Protocol):
    def build(self) -> ProjectDataset: ...


class ProjectDatasetCache:
    """Hold the most recent dataset and rebuild it on demand.

    Only one build runs at a time. A caller arriving while a build is in
    flight waits for it and reuses its result, even when it asked for a
    forced reload. A failed build leaves the cache as it was.
    """

    def __init__(self, builder: DatasetSource) -> None:
        self._builder = builder
        self._state_lock = Lock()
        self._build_lock = Lock()
        self._dataset: ProjectDataset | None = None
        self._state = CacheState.UNINITIALIZED
        self._generation = 0
        self._epoch = 0

    @property
    def state(self) -> CacheState:
        with self._state_lock:
            return self._state

    def peek(self) -> ProjectDataset | None:
        """Return the cached dataset without triggering a build."""

        with self._state_lock:
            return self._dataset

    def get(self, force_reload: bool = False) -> ProjectDataset:
        """Return the cached dataset, building it when absent or forced."""

        with self._state_lock:
            if self._dataset is not None and not force_reload:
                return self._dataset
            observed_generation = self._generation

        with self._build_lock:
            with self._state_lock:
                if self._dataset is not None and self._generation != observed_generation:
                    logger.debug("content.cache.reuse", extra={"generation": self._generation})
                    return self._dataset
                epoch = self._epoch

            dataset = self._builder.build()

            with self._state_lock:
                # An invalidation that raced this build wins; the result is
                # still returned to this caller but not cached.
                if self._epoch == epoch:
                    self._dataset = dataset
                    self._state = CacheState.POPULATED
                    self._generation += 1
            return dataset

    def rebuild(self) -> ProjectDataset:
        return self.get(force_reload=True)

    def invalidate(self) -> None:
        """Drop the cached dataset so the next read rescans the content tree."""

        with self._state_lock:
            self._epoch += 1
            if self._state is CacheState.UNINITIALIZED:
                return
            self._dataset = None
            self._state = CacheState.INVALIDATED
        logger.debug("content.cache.invalidate")

    def published_projects(self, force_reload: bool = False) -> list[ProjectPublic]:
        """Return a fresh list of published public views."""

        return list(self.get(force_reload).published)


@lru_cache()
def get_dataset_cache() -> ProjectDatasetCache:
    """Provide the shared cache bound to the configured projects directory."""

    settings = get_settings()
    return ProjectDatasetCache(ProjectDatasetBuilder(settings.paths.projects_dir))


def load_dataset(force_reload: bool = False) -> ProjectDataset:
    return get_dataset_cache().get(force_reload)


def load_published_projects(force_reload: bool = False) -> list[ProjectPublic]:
    return get_dataset_cache().published_projects(force_reload)


def invalidate_cache() -> None:
    get_dataset_cache().invalidate()


__all__ = [
    "CacheState",
    "ProjectDatasetCache",
    "get_dataset_cache",
    "load_dataset",
    "load_published_projects",
    "invalidate_cache",
]

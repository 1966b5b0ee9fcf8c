"""Core application services and configuration."""

from .content import ProjectDatasetCache, get_dataset_cache
from .settings import Settings, get_settings

__all__ = (
    "Settings",
    "get_settings",
    "ProjectDatasetCache",
    "get_dataset_cache",
)

"""Public interface for the project content loader."""

from .cache import (
    CacheState,
    ProjectDatasetCache,
    get_dataset_cache,
    invalidate_cache,
    load_dataset,
    load_published_projects,
)
from .dataset import ProjectDataset, ProjectDatasetBuilder, assemble_dataset
from .exceptions import (
    AliasConflictError,
    ContentError,
    ContentUriMismatchError,
    DatasetIntegrityError,
    DuplicateSlugError,
    InvalidFieldError,
    InvalidStatusError,
    MalformedRecordError,
    MissingFieldError,
    ProjectValidationError,
    SelfAliasError,
    SlugMismatchError,
    UnknownFieldError,
)
from .records import parse_record, validate_record

__all__ = [
    "CacheState",
    "ProjectDatasetCache",
    "get_dataset_cache",
    "invalidate_cache",
    "load_dataset",
    "load_published_projects",
    "ProjectDataset",
    "ProjectDatasetBuilder",
    "assemble_dataset",
    "parse_record",
    "validate_record",
    "ContentError",
    "ProjectValidationError",
    "MalformedRecordError",
    "UnknownFieldError",
    "MissingFieldError",
    "InvalidFieldError",
    "SlugMismatchError",
    "InvalidStatusError",
    "ContentUriMismatchError",
    "DatasetIntegrityError",
    "DuplicateSlugError",
    "SelfAliasError",
    "AliasConflictError",
]

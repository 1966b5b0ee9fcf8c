"""Exceptions raised while loading and validating project content."""

from __future__ import annotations

from typing import Any


class ContentError(RuntimeError):
    """Base exception for project content failures."""

    def __init__(self, message: str, *, code: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class ProjectValidationError(ContentError):
    """Raised when a single project record violates the content schema."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details={"source": source, **(details or {})})
        self.source = source


class MalformedRecordError(ProjectValidationError):
    """Raised when a metadata file is not a JSON object."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            f"Project record {source} is not a valid JSON object: {reason}",
            code="content.malformed_record",
            source=source,
            details={"reason": reason},
        )


class UnknownFieldError(ProjectValidationError):
    """Raised when a record carries a field outside the recognised schema."""

    def __init__(self, source: str, field: str) -> None:
        super().__init__(
            f'Unexpected field "{field}" in project record {source}',
            code="content.unknown_field",
            source=source,
            details={"field": field},
        )
        self.field = field


class MissingFieldError(ProjectValidationError):
    """Raised when a required field is absent or null."""

    def __init__(self, source: str, field: str) -> None:
        super().__init__(
            f'Missing required field "{field}" in project record {source}',
            code="content.missing_field",
            source=source,
            details={"field": field},
        )
        self.field = field


class InvalidFieldError(ProjectValidationError):
    """Raised when a field is present but malformed."""

    def __init__(self, source: str, field: str, reason: str) -> None:
        super().__init__(
            f'Invalid field "{field}" in project record {source}: {reason}',
            code="content.invalid_field",
            source=source,
            details={"field": field, "reason": reason},
        )
        self.field = field


class SlugMismatchError(ProjectValidationError):
    """Raised when a record's slug disagrees with the folder it was loaded from."""

    def __init__(self, source: str, slug: str) -> None:
        super().__init__(
            f"Slug mismatch: record slug {slug} does not match folder {source}",
            code="content.slug_mismatch",
            source=source,
            details={"slug": slug},
        )


class InvalidStatusError(ProjectValidationError):
    """Raised when ``status`` is not one of the known lifecycle states."""

    def __init__(self, source: str, status: Any) -> None:
        super().__init__(
            f'Invalid status "{status}" in project {source}',
            code="content.invalid_status",
            source=source,
            details={"status": status},
        )


class ContentUriMismatchError(ProjectValidationError):
    """Raised when ``contentUri`` differs from the path derived from the folder."""

    def __init__(self, source: str, expected: str, received: str) -> None:
        super().__init__(
            f"contentUri mismatch in {source}: expected {expected}, received {received}",
            code="content.content_uri_mismatch",
            source=source,
            details={"expected": expected, "received": received},
        )


class DatasetIntegrityError(ContentError):
    """Raised when records are individually valid but conflict with each other."""


class DuplicateSlugError(DatasetIntegrityError):
    """Raised when two records claim the same canonical slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f"Duplicate project slug detected: {slug}",
            code="content.duplicate_slug",
            details={"slug": slug},
        )


class SelfAliasError(DatasetIntegrityError):
    """Raised when a record lists its own canonical slug as an alias."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f'Alias "{slug}" duplicates canonical slug for {slug}',
            code="content.self_alias",
            details={"slug": slug},
        )


class AliasConflictError(DatasetIntegrityError):
    """Raised when one alias is claimed by two different canonical slugs."""

    def __init__(self, alias: str, existing: str, claimant: str) -> None:
        super().__init__(
            f'Alias "{alias}" already assigned to {existing} (claimed again by {claimant})',
            code="content.alias_conflict",
            details={"alias": alias, "existing": existing, "claimant": claimant},
        )


__all__ = [
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

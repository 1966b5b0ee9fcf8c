"""Validation and projection of raw project records into typed views.

A raw record is the untyped mapping parsed from ``project.json``. It is checked
by :func:`validate_record` and converted by :func:`parse_record` into a frozen
:class:`~portfolio.models.project.ProjectBundle`; the raw mapping itself never
leaves this module.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ...models.project import ProjectBundle, ProjectInternal, ProjectPublic, ProjectStatus
from .exceptions import (
    ContentUriMismatchError,
    InvalidFieldError,
    InvalidStatusError,
    MissingFieldError,
    SlugMismatchError,
    UnknownFieldError,
)
from .schema import (
    ALLOWED_FIELDS,
    INTERNAL_FIELDS,
    PUBLIC_FIELDS,
    REQUIRED_FIELDS,
    expected_content_uri,
)

_STATUSES = tuple(status.value for status in ProjectStatus)


def validate_record(raw: Mapping[str, Any], source: str) -> None:
    """Check *raw* against the record schema, raising on the first violation.

    *source* is the name of the folder the record was loaded from.
    """

    for key in raw:
        if key not in ALLOWED_FIELDS:
            raise UnknownFieldError(source, key)

    for field in REQUIRED_FIELDS:
        if raw.get(field) is None:
            raise MissingFieldError(source, field)

    for field in ("id", "slug", "title", "summary"):
        if not _is_non_blank_string(raw[field]):
            raise InvalidFieldError(source, field, "must be a non-empty string")

    if raw["slug"] != source:
        raise SlugMismatchError(source, raw["slug"])

    status = raw["status"]
    if not isinstance(status, str) or status not in _STATUSES:
        raise InvalidStatusError(source, status)

    content_uri = raw["contentUri"]
    if not _is_non_blank_string(content_uri):
        raise InvalidFieldError(source, "contentUri", "must be a non-empty string")
    expected = expected_content_uri(source)
    if content_uri != expected:
        raise ContentUriMismatchError(source, expected, content_uri)

    # Dates stay opaque strings; no calendar parsing happens here.
    for field in ("createdAt", "updatedAt"):
        if not _is_non_blank_string(raw[field]):
            raise InvalidFieldError(source, field, "must be a non-empty string")


def parse_record(raw: Mapping[str, Any], source: str, markdown: str) -> ProjectBundle:
    """Validate *raw* and project it into public and internal views."""

    validate_record(raw, source)

    public = _build_view(ProjectPublic, _public_payload(raw, markdown), source)
    internal = _build_view(ProjectInternal, _internal_payload(raw, source), source)
    return ProjectBundle(
        slug=public.slug,
        status=internal.status,
        public=public,
        internal=internal,
    )


def _public_payload(raw: Mapping[str, Any], markdown: str) -> dict[str, Any]:
    payload = {field: raw[field] for field in PUBLIC_FIELDS if raw.get(field) is not None}
    # Markdown only fills in for a missing inline body, it never replaces one.
    if not payload.get("body") and markdown.strip():
        payload["body"] = markdown
    return payload


def _internal_payload(raw: Mapping[str, Any], source: str) -> dict[str, Any]:
    payload = {field: raw[field] for field in INTERNAL_FIELDS if raw.get(field) is not None}
    payload["aliases"] = _normalise_aliases(raw.get("aliases"), source)
    return payload


def _normalise_aliases(value: Any, source: str) -> tuple[str, ...]:
    if not value:
        return ()
    if not isinstance(value, list):
        raise InvalidFieldError(source, "aliases", "must be an array of strings")

    aliases: list[str] = []
    for item in value:
        if not _is_non_blank_string(item):
            raise InvalidFieldError(source, "aliases", "must contain non-empty strings")
        aliases.append(item.strip())
    return tuple(dict.fromkeys(aliases))


def _build_view(model: type[BaseModel], payload: dict[str, Any], source: str) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = error.get("loc") or ("record",)
        field = str(location[0])
        path = ".".join(str(part) for part in location)
        raise InvalidFieldError(source, field, f"{path}: {error['msg']}") from exc


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


__all__ = ["validate_record", "parse_record"]

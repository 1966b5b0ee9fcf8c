"""HTTP routes rendering the published portfolio projects."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from ...core.content import ContentError, ProjectDataset, ProjectDatasetCache, get_dataset_cache
from ...models.common import ResponseEnvelope
from ...models.project import ProjectListResponse, ProjectPublic

router = APIRouter(prefix="/projects", tags=["projects"])


def get_cache() -> ProjectDatasetCache:
    return get_dataset_cache()


def _error_response(
    status_code: int, code: str, message: str, details: dict[str, Any] | None = None
) -> JSONResponse:
    envelope = ResponseEnvelope.error_payload(code=code, message=message, details=details)
    return JSONResponse(
        status_code=status_code, content=envelope.model_dump(mode="json")
    )


def _content_failure(exc: ContentError) -> JSONResponse:
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, exc.code, str(exc), exc.details
    )


@router.get(
    "",
    response_model=ResponseEnvelope[ProjectListResponse],
    response_model_exclude_none=True,
    summary="List published projects",
)
async def list_projects(
    cache: ProjectDatasetCache = Depends(get_cache),
) -> ResponseEnvelope[ProjectListResponse] | JSONResponse:
    try:
        projects = cache.published_projects()
    except ContentError as exc:
        return _content_failure(exc)

    return ResponseEnvelope.success_payload(ProjectListResponse(items=projects))


@router.get(
    "/archived",
    response_model=ResponseEnvelope[ProjectListResponse],
    response_model_exclude_none=True,
    summary="List archived projects",
)
async def list_archived_projects(
    cache: ProjectDatasetCache = Depends(get_cache),
) -> ResponseEnvelope[ProjectListResponse] | JSONResponse:
    try:
        dataset = cache.get()
    except ContentError as exc:
        return _content_failure(exc)

    return ResponseEnvelope.success_payload(ProjectListResponse(items=list(dataset.archived)))


@router.get(
    "/{slug}",
    response_model=ResponseEnvelope[ProjectPublic],
    response_model_exclude_none=True,
    summary="Retrieve a single project, following historical aliases",
)
async def get_project(
    slug: str,
    request: Request,
    cache: ProjectDatasetCache = Depends(get_cache),
) -> ResponseEnvelope[ProjectPublic] | JSONResponse | RedirectResponse:
    try:
        dataset: ProjectDataset = cache.get()
    except ContentError as exc:
        return _content_failure(exc)

    project = dataset.find_public(slug)
    if project is not None:
        return ResponseEnvelope.success_payload(project)

    canonical = dataset.resolve_redirect(slug)
    if canonical is not None:
        target = request.url_for("get_project", slug=canonical)
        return RedirectResponse(url=str(target), status_code=status.HTTP_301_MOVED_PERMANENTLY)

    return _error_response(
        status.HTTP_404_NOT_FOUND, "project_not_found", f"Project '{slug}' was not found."
    )


__all__ = ("router",)

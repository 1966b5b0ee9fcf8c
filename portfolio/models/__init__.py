"""Shared Pydantic models used across the application."""

from .common import ErrorDetail, ResponseEnvelope
from .project import (
    Collaborator,
    ImageObject,
    ProjectBundle,
    ProjectInternal,
    ProjectListResponse,
    ProjectPublic,
    ProjectStatus,
    Timeframe,
)

__all__ = (
    "ErrorDetail",
    "ResponseEnvelope",
    "Collaborator",
    "ImageObject",
    "ProjectBundle",
    "ProjectInternal",
    "ProjectListResponse",
    "ProjectPublic",
    "ProjectStatus",
    "Timeframe",
)

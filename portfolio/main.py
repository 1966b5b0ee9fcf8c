"""Application entrypoint for the FastAPI service."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routers
from .core.content import get_dataset_cache
from .core.settings import get_settings


def create_application() -> FastAPI:
    """Construct and configure the FastAPI application instance."""

    settings = get_settings()
    application = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=_lifespan
    )
    _configure_cors(application, settings.allowed_origins)

    register_routers(application)

    return application


def _configure_cors(app: FastAPI, origins: Sequence[str] | None) -> None:
    allow_all = not origins
    allow_list = ["*"] if allow_all else list(origins or [])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    get_dataset_cache().invalidate()


app = create_application()

__all__ = ("app", "create_application")

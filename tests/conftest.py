from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

import portfolio.core.content.cache as cache_module
import portfolio.core.settings as settings_module

ProjectFactory = Callable[..., Path]


def record_for(slug: str, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": f"proj-{slug}",
        "slug": slug,
        "title": f"Project {slug}",
        "summary": f"Summary of {slug}",
        "status": "published",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-02-01T00:00:00Z",
        "contentUri": f"content/projects/{slug}/content.md",
    }
    record.update(overrides)
    return {key: value for key, value in record.items() if value is not ...}


@pytest.fixture()
def runtime_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    base_dir = tmp_path / "site"
    (base_dir / "content" / "projects").mkdir(parents=True)
    monkeypatch.setenv("PORTFOLIO_BASE_DIR", str(base_dir))
    monkeypatch.delenv("PORTFOLIO_CONTENT_DIR", raising=False)
    settings_module.get_settings.cache_clear()
    cache_module.get_dataset_cache.cache_clear()
    yield base_dir
    settings_module.get_settings.cache_clear()
    cache_module.get_dataset_cache.cache_clear()


@pytest.fixture()
def projects_dir(runtime_environment: Path) -> Path:
    return runtime_environment / "content" / "projects"


@pytest.fixture()
def write_project(projects_dir: Path) -> ProjectFactory:
    """Create ``{slug}/project.json`` and ``{slug}/content.md``.

    Pass ``folder`` to store the record under a different directory name and
    a field set to ``...`` to drop it from the record.
    """

    def _write(
        slug: str,
        *,
        folder: str | None = None,
        markdown: str = "",
        raw: Any = None,
        **fields: Any,
    ) -> Path:
        project_dir = projects_dir / (folder or slug)
        project_dir.mkdir(parents=True, exist_ok=True)
        payload = raw if raw is not None else record_for(slug, **fields)
        text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
        (project_dir / "project.json").write_text(text, encoding="utf-8")
        (project_dir / "content.md").write_text(markdown, encoding="utf-8")
        return project_dir

    return _write


@pytest.fixture()
def client(runtime_environment: Path) -> TestClient:
    from portfolio.main import create_application

    application = create_application()

    with TestClient(application) as test_client:
        yield test_client

from __future__ import annotations

from pathlib import Path

import pytest

from portfolio.core.settings import Settings


def test_allowed_origins_accepts_comma_separated_env(
    runtime_environment: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PORTFOLIO_ALLOWED_ORIGINS", "https://a.example, https://b.example")

    settings = Settings()

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_paths_resolve_from_base_and_content_dirs(
    tmp_path: Path, runtime_environment: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    assert Settings().paths.projects_dir == (runtime_environment / "content" / "projects").resolve()

    monkeypatch.setenv("PORTFOLIO_CONTENT_DIR", str(tmp_path / "elsewhere"))
    paths = Settings().paths

    assert paths.content_dir == (tmp_path / "elsewhere").resolve()
    assert paths.projects_dir == (tmp_path / "elsewhere" / "projects").resolve()

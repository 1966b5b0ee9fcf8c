from __future__ import annotations

from pathlib import Path

import pytest

from conftest import ProjectFactory
from portfolio.cli import main


def test_validate_prints_counts(
    write_project: ProjectFactory, capsys: pytest.CaptureFixture[str]
) -> None:
    write_project("live", aliases=["old-live", "older-live"])
    write_project("retired", status="archived")
    write_project("upcoming", status="draft")

    exit_code = main([])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert (
        "Validated 3 project(s): 1 published, 1 archived, 1 draft, 2 redirect(s)." in out
    )


def test_validate_accepts_explicit_content_dir(
    tmp_path: Path, runtime_environment: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    elsewhere = tmp_path / "elsewhere"
    (elsewhere / "projects").mkdir(parents=True)

    assert main(["--content-dir", str(elsewhere)]) == 0
    assert "Validated 0 project(s)" in capsys.readouterr().out


def test_validate_fails_on_bad_record(
    write_project: ProjectFactory, capsys: pytest.CaptureFixture[str]
) -> None:
    write_project("foo", contentUri="content/projects/bar/content.md")

    exit_code = main([])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Project content validation failed:" in err
    assert "contentUri mismatch in foo" in err


def test_validate_fails_when_content_root_is_missing(
    tmp_path: Path, runtime_environment: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["--content-dir", str(tmp_path / "missing"), "--verbose"])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Project content validation failed:" in err
    assert "Traceback" in err

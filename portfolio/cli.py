"""Build-time gate that validates every project record under the content tree."""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

from .core.content import (
    ContentError,
    ProjectDataset,
    ProjectDatasetBuilder,
    ProjectDatasetCache,
    get_dataset_cache,
)
from .core.settings import get_settings


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="portfolio-validate",
        description="Validate project records and report dataset counts",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Content directory whose projects sub-directory is validated (default: from settings).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit build events and print a traceback on failure.",
    )
    return parser.parse_args(argv)


def _resolve_cache(content_dir: Path | None) -> ProjectDatasetCache:
    if content_dir is None:
        return get_dataset_cache()
    projects_dir = content_dir.expanduser().resolve() / get_settings().projects_subdir
    return ProjectDatasetCache(ProjectDatasetBuilder(projects_dir))


def format_summary(dataset: ProjectDataset) -> str:
    counts = dataset.summary()
    return (
        f"Validated {counts['projects']} project(s): {counts['published']} published, "
        f"{counts['archived']} archived, {counts['drafts']} draft, "
        f"{counts['redirects']} redirect(s)."
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    cache = _resolve_cache(args.content_dir)
    try:
        dataset = cache.rebuild()
    except (ContentError, OSError) as exc:
        print("Project content validation failed:", file=sys.stderr)
        print(str(exc), file=sys.stderr)
        if args.verbose:
            traceback.print_exception(exc, file=sys.stderr)
        return 1

    print(format_summary(dataset))
    return 0


if __name__ == "__main__":
    sys.exit(main())

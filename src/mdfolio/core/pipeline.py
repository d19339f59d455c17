"""Pipeline step functions: collect, sort, and write each manifest"""

from pathlib import Path
from typing import Callable, NamedTuple

from mdfolio.config import Settings
from mdfolio.core.collect import collect_posts, collect_projects
from mdfolio.core.manifest import sort_entries, write_manifest


POSTS = "posts"
PROJECTS = "projects"


class BuildResult(NamedTuple):
    kind: str
    count: int
    output: Path


def _run(
    kind: str,
    collect: Callable,
    source_dir: Path,
    output: Path,
    settings: Settings,
    dry_run: bool,
    ) -> BuildResult:
    entries = sort_entries(collect(source_dir, settings))
    if not dry_run:
        write_manifest(entries, output)
    return BuildResult(kind, len(entries), output)


def run_posts(settings: Settings, dry_run: bool = False) -> BuildResult:
    """Generate the posts manifest from settings.blog_dir."""
    return _run(POSTS, collect_posts, Path(settings.blog_dir), Path(settings.blog_output), settings, dry_run)


def run_projects(settings: Settings, dry_run: bool = False) -> BuildResult:
    """Generate the projects manifest from settings.projects_dir."""
    return _run(
        PROJECTS, collect_projects, Path(settings.projects_dir), Path(settings.projects_output), settings, dry_run,
    )


def run_build(settings: Settings, dry_run: bool = False) -> list[BuildResult]:
    """Generate both manifests. Any failure propagates; a rerun starts from scratch."""
    return [run_posts(settings, dry_run), run_projects(settings, dry_run)]

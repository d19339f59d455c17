"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdfolio.config import Settings, load_config
from mdfolio.core.collect import build_post, build_project
from mdfolio.core.parse import read_document
from mdfolio.core.pipeline import BuildResult, run_build, run_posts, run_projects


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_results(results: list[BuildResult], dry_run: bool) -> None:
    """Print one summary line per generated manifest."""
    verb = "Would generate" if dry_run else "Generated"
    for r in results:
        typer.echo(f"{verb} {r.count} {r.kind} -> {r.output}")


def build_cmd(
    blog_dir: Annotated[Optional[str], typer.Option("--blog-dir", help="Blog markdown directory")] = None,
    projects_dir: Annotated[Optional[str], typer.Option("--projects-dir", help="Project markdown directory")] = None,
    blog_out: Annotated[Optional[str], typer.Option("--blog-out", help="Posts manifest path")] = None,
    projects_out: Annotated[Optional[str], typer.Option("--projects-out", help="Projects manifest path")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Collect and sort without writing files")] = False,
    ):
    """Generate both the posts and the projects manifest."""
    settings = _settings(overrides={
        "blog_dir": blog_dir, "projects_dir": projects_dir,
        "blog_output": blog_out, "projects_output": projects_out,
    })
    try:
        results = run_build(settings, dry_run)
    except Exception as e:
        _fail("Failed to generate manifests", e)
    _echo_results(results, dry_run)


def posts_cmd(
    blog_dir: Annotated[Optional[str], typer.Option("--blog-dir", help="Blog markdown directory")] = None,
    blog_out: Annotated[Optional[str], typer.Option("--blog-out", help="Posts manifest path")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Collect and sort without writing files")] = False,
    ):
    """Generate the posts manifest only."""
    settings = _settings(overrides={"blog_dir": blog_dir, "blog_output": blog_out})
    try:
        result = run_posts(settings, dry_run)
    except Exception as e:
        _fail("Failed to generate posts manifest", e)
    _echo_results([result], dry_run)


def projects_cmd(
    projects_dir: Annotated[Optional[str], typer.Option("--projects-dir", help="Project markdown directory")] = None,
    projects_out: Annotated[Optional[str], typer.Option("--projects-out", help="Projects manifest path")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Collect and sort without writing files")] = False,
    ):
    """Generate the projects manifest only."""
    settings = _settings(overrides={"projects_dir": projects_dir, "projects_output": projects_out})
    try:
        result = run_projects(settings, dry_run)
    except Exception as e:
        _fail("Failed to generate projects manifest", e)
    _echo_results([result], dry_run)


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to inspect")],
    kind: Annotated[str, typer.Option("--kind", help="Entry type: post or project")] = "post",
    ):
    """Print the manifest entry derived from a single markdown file."""
    builders = {"post": build_post, "project": build_project}
    if kind not in builders:
        _fail(f"Unknown kind '{kind}', expected post or project")
    settings = _settings()
    try:
        entry = builders[kind](read_document(path), settings)
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(json.dumps(entry.to_json_dict(), indent=2, ensure_ascii=False))

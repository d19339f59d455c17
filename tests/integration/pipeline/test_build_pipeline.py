"""Integration tests for the collect -> sort -> write pipeline.

Content layout used by the tests below
--------------------------------------
    blog/
        hello.md        frontmatter title/date 2024-03-05
        older.md        frontmatter date 2023-01-10, heading title
        template.md     never published
    projects/
        cli-tool.md     no frontmatter, inline keywords + bare URL
        site.md         frontmatter, dated 2024-06-01

Expected manifests:
    blog.json       [hello, older]
    projects.json   [site, cli-tool]   (cli-tool has no frontmatter, so its mtime 2022-02-02 is the date)
"""

import json
import os
from datetime import datetime
from pathlib import Path

import pytest

from mdfolio.core.pipeline import run_build, run_posts, run_projects


HELLO = "---\ntitle: Hello World\ndate: 2024-03-05\n---\nSome **content** here.\n"
OLDER = "---\ndate: 2023-01-10\n---\n# An Older Post\n\nWritten a while ago.\n"
CLI_TOOL = (
    "Cli Tool\n\n"
    "# Cli Tool\n\n"
    "> 关键词：cli, tool\n\n"
    "A tiny helper for the terminal.\n\n"
    "仓库: https://example.com/cli-tool\n"
)
SITE = "---\ntitle: Site\ndate: 2024-06-01\ntags: [web]\n---\n# Site\n\nThe portfolio itself.\n"


@pytest.fixture(name="populated")
def populated_fixture(content_dirs):
    blog, projects = content_dirs
    (blog / "hello.md").write_text(HELLO, encoding="utf-8")
    (blog / "older.md").write_text(OLDER, encoding="utf-8")
    (blog / "template.md").write_text(HELLO, encoding="utf-8")
    (projects / "site.md").write_text(SITE, encoding="utf-8")
    cli_tool = projects / "cli-tool.md"
    cli_tool.write_text(CLI_TOOL, encoding="utf-8")
    ts = datetime(2022, 2, 2, 12, 0).timestamp()
    os.utime(cli_tool, (ts, ts))
    return blog, projects


def _load(path: str) -> list:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def test_run_build_writes_both_manifests(settings, populated):
    results = run_build(settings)
    assert [(r.kind, r.count) for r in results] == [("posts", 2), ("projects", 2)]
    assert Path(settings.blog_output).exists()
    assert Path(settings.projects_output).exists()


def test_run_build_posts_manifest(settings, populated):
    run_build(settings)
    posts = _load(settings.blog_output)
    assert [p["id"] for p in posts] == ["hello", "older"]
    assert posts[0] == {
        "id": "hello",
        "title": "Hello World",
        "excerpt": "Some content here.",
        "date": "2024-03-05",
        "readingTime": 1,
        "detailsFile": "hello.md",
    }
    assert posts[1]["title"] == "An Older Post"
    assert posts[1]["excerpt"] == "Written a while ago."


def test_run_build_projects_manifest(settings, populated):
    run_build(settings)
    projects = _load(settings.projects_output)
    assert [p["id"] for p in projects] == ["site", "cli-tool"]
    cli_tool = projects[1]
    assert cli_tool["title"] == "Cli Tool"
    assert cli_tool["tags"] == ["cli", "tool"]
    assert cli_tool["link"] == "https://example.com/cli-tool"
    assert cli_tool["description"] == "A tiny helper for the terminal."
    assert cli_tool["date"] == "2022-02-02"
    assert "link" not in projects[0]


def test_run_build_output_is_pretty_with_trailing_newline(settings, populated):
    run_build(settings)
    text = Path(settings.blog_output).read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": "hello"')
    assert text.endswith("\n]\n")


def test_run_build_is_idempotent(settings, populated):
    run_build(settings)
    first = Path(settings.projects_output).read_text(encoding="utf-8")
    run_build(settings)
    assert Path(settings.projects_output).read_text(encoding="utf-8") == first


def test_run_build_dry_run_writes_nothing(settings, populated):
    results = run_build(settings, dry_run=True)
    assert [r.count for r in results] == [2, 2]
    assert not Path(settings.blog_output).exists()
    assert not Path(settings.projects_output).exists()


def test_run_posts_and_projects_independently(settings, populated):
    run_posts(settings)
    assert Path(settings.blog_output).exists()
    assert not Path(settings.projects_output).exists()
    run_projects(settings)
    assert Path(settings.projects_output).exists()


def test_run_build_missing_directory_aborts(settings, tmp_path):
    """A missing projects directory propagates after posts were written."""
    broken = settings.model_copy(update={"projects_dir": str(tmp_path / "nope")})
    with pytest.raises(FileNotFoundError):
        run_build(broken)
    assert _load(settings.blog_output) == []

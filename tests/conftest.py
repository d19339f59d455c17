"""Root test configuration: content directory fixtures shared by all tests"""

import pytest

from mdfolio.config import Settings


@pytest.fixture(name="content_dirs")
def content_dirs_fixture(tmp_path):
    """Empty blog and projects directories under tmp_path."""
    blog = tmp_path / "content" / "blog"
    projects = tmp_path / "content" / "projects"
    blog.mkdir(parents=True)
    projects.mkdir(parents=True)
    return blog, projects


@pytest.fixture(name="settings")
def settings_fixture(tmp_path, content_dirs):
    """Settings wired to the tmp content directories and a tmp public/ output dir."""
    blog, projects = content_dirs
    return Settings(
        blog_dir=str(blog),
        projects_dir=str(projects),
        blog_output=str(tmp_path / "public" / "blog.json"),
        projects_output=str(tmp_path / "public" / "projects.json"),
    )

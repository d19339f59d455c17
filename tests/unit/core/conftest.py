"""Shared sample documents for core unit tests"""

import os
from datetime import datetime

import pytest


HELLO_MD = """\
---
title: Hello World
date: 2024-03-05
tags: [foo, bar]
---
Some **content** here.
"""

PROJECT_MD = """\
# My Project

关键词: cli, tool

A small command line helper.

Source at https://example.com/repo
"""


@pytest.fixture(name="write_md")
def write_md_fixture():
    """Write text to dir/name and optionally pin its mtime; returns the path."""
    def _write(directory, name, text, mtime: datetime = None):
        path = directory / name
        path.write_text(text, encoding="utf-8")
        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(path, (ts, ts))
        return path
    return _write


@pytest.fixture(name="hello_md")
def hello_md_fixture():
    return HELLO_MD


@pytest.fixture(name="project_md")
def project_md_fixture():
    return PROJECT_MD

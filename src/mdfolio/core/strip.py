"""Regex-based markdown to plain text conversion for heuristic text mining.

The output approximates what a reader sees and is only used to derive
excerpts, descriptions, and reading times; it is never rendered. No markdown
AST is built: substitutions run in a fixed order, and that order matters.
Code, images, and links are removed before emphasis markers so URLs are not
mangled, and line-start markers are stripped only after link substitution.
"""

import re

from mdfolio.core.parse import normalize_newlines


LEADING_HEADING = re.compile(r'^\s*#{1,6}\s+.*\n')
FENCED_CODE     = re.compile(r'```.*?```', re.DOTALL)
INLINE_CODE     = re.compile(r'`[^`]*`')
IMAGE           = re.compile(r'!\[[^\]]*\]\([^)]*\)')
LINK            = re.compile(r'\[([^\]]+)\]\([^)]*\)')
EMPHASIS        = re.compile(r'[*_~]')
HEADING_MARKER  = re.compile(r'^\s{0,3}#{1,6}\s+', re.MULTILINE)
QUOTE_MARKER    = re.compile(r'^\s{0,3}>\s?', re.MULTILINE)
LIST_MARKER     = re.compile(r'^\s{0,3}(?:[-*+]|[0-9]+\.)\s+', re.MULTILINE)
HR_LINE         = re.compile(r'^\s*[-*_]{3,}\s*$', re.MULTILINE)
TABLE_ROW       = re.compile(r'^\s*\|.*\|\s*$', re.MULTILINE)
META_TEXT_LINE  = re.compile(r'^.*(?:发布时间|阅读时间).*$\n?', re.MULTILINE)
WHITESPACE      = re.compile(r'\s+')

FIRST_HEADING   = re.compile(r'^\s*#{1,6}\s+.*$', re.MULTILINE)
LINE_QUOTE      = re.compile(r'^\s{0,3}>\s?')
LINE_EMPHASIS   = re.compile(r'[*_`~]')
PROJECT_META    = re.compile(
    r'^(?:项目关键词|关键词|Tags?|Tag|源码仓库|仓库|Repo|Repository)\s*[:：]', re.IGNORECASE
)


def strip_markdown(markdown: str) -> str:
    """Return approximate plain text of markdown, whitespace collapsed."""
    text = normalize_newlines(markdown)
    text = LEADING_HEADING.sub('', text, count=1)
    text = FENCED_CODE.sub(' ', text)
    text = INLINE_CODE.sub(' ', text)
    text = IMAGE.sub(' ', text)
    text = LINK.sub(r'\1', text)
    text = EMPHASIS.sub('', text)
    text = HEADING_MARKER.sub('', text)
    text = QUOTE_MARKER.sub('', text)
    text = LIST_MARKER.sub('', text)
    text = HR_LINE.sub(' ', text)
    text = TABLE_ROW.sub(' ', text)
    # publish/reading time lines are page chrome, not content
    text = META_TEXT_LINE.sub(' ', text)
    return WHITESPACE.sub(' ', text).strip()


def normalize_line(line: str) -> str:
    """Drop one blockquote marker and inline emphasis/code markers from a line."""
    return LINE_EMPHASIS.sub('', LINE_QUOTE.sub('', line, count=1)).strip()


def slice_from_first_heading(markdown: str) -> str:
    """Return markdown starting at its first heading line, or unchanged if none."""
    m = FIRST_HEADING.search(markdown)
    return markdown[m.start():] if m else markdown


def remove_project_meta_lines(markdown: str) -> str:
    """Remove keyword and repository label lines from a project body."""
    lines = normalize_newlines(markdown).split('\n')
    return '\n'.join(line for line in lines if not PROJECT_META.match(normalize_line(line)))

"""File discovery, document reading, and frontmatter extraction"""

import re
from datetime import datetime
from pathlib import Path

from mdfolio.core.models import ParsedDocument, RawDocument


FRONTMATTER_RE = re.compile(r'^---\n(.*?)\n---\n?(.*)$', re.DOTALL)
MD_EXTENSION = '.md'


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n')


def clean_value(value: str) -> str:
    """Trim value and unwrap one layer of matching single or double quotes."""
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in ('"', "'"):
        return trimmed[1:-1].strip()
    return trimmed


def extract_frontmatter(markdown: str) -> ParsedDocument:
    """Split a markdown document into flat string metadata and body.

    Only a block opened by `---` on the very first line and closed by a later
    `---` line counts as frontmatter. Anything else is treated as body.
    """
    normalized = normalize_newlines(markdown).removeprefix('\ufeff')
    m = FRONTMATTER_RE.match(normalized)
    if not m:
        return ParsedDocument(metadata={}, body=normalized)

    metadata: dict[str, str] = {}
    for line in m.group(1).split('\n'):
        if not line.strip() or ':' not in line:
            continue
        key, _, value = line.partition(':')
        if key.strip() and value:
            metadata[key.strip()] = clean_value(value)
    return ParsedDocument(metadata=metadata, body=m.group(2))


def discover_files(directory: Path, template_name: str = 'template.md') -> list[Path]:
    """Return publishable .md regular files (not symlinks) directly under directory, sorted by name."""
    if not directory.is_dir():
        raise FileNotFoundError(f"Content directory not found: {directory}")
    excluded = template_name.lower()
    return sorted(
        (p for p in directory.iterdir()
         if p.is_file() and not p.is_symlink()
         and p.name.lower().endswith(MD_EXTENSION)
         and p.name.lower() != excluded),
        key=lambda p: p.name,
    )


def read_document(path: Path) -> RawDocument:
    """Read file content and modification time as one RawDocument."""
    raw = path.read_text(encoding='utf-8', errors='replace')
    mtime = datetime.fromtimestamp(path.stat().st_mtime)
    name = path.name
    return RawDocument(
        id=name[:-len(MD_EXTENSION)] if name.endswith(MD_EXTENSION) else name,
        file_name=name,
        raw=raw,
        mtime=mtime,
    )

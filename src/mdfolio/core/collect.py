"""Build one manifest entry per markdown file in a content directory"""

from pathlib import Path

from mdfolio.config import Settings
from mdfolio.core.fields import (
    extract_inline_link,
    get_reading_time,
    parse_reading_time,
    pick_date,
    pick_description,
    pick_excerpt,
    pick_link,
    pick_tags,
    pick_title,
)
from mdfolio.core.models import BlogEntry, ProjectEntry, RawDocument
from mdfolio.core.parse import discover_files, extract_frontmatter, read_document
from mdfolio.core.strip import remove_project_meta_lines, slice_from_first_heading, strip_markdown


def build_post(doc: RawDocument, settings: Settings) -> BlogEntry:
    parsed = extract_frontmatter(doc.raw)
    metadata, body = parsed.metadata, parsed.body.strip()
    plain = strip_markdown(body)
    return BlogEntry(
        id=doc.id,
        title=pick_title(metadata, body, doc.id),
        excerpt=pick_excerpt(metadata, plain, settings.excerpt_length),
        date=pick_date(metadata, doc.mtime),
        reading_time=(parse_reading_time(metadata.get('readingTime'))
                      or get_reading_time(plain, settings.words_per_minute)),
        details_file=doc.file_name,
    )


def build_project(doc: RawDocument, settings: Settings) -> ProjectEntry:
    """Derive a project entry; keyword/repo label lines feed tags and link but never the description."""
    parsed = extract_frontmatter(doc.raw)
    metadata, body = parsed.metadata, parsed.body.strip()
    project_body = remove_project_meta_lines(slice_from_first_heading(body))
    return ProjectEntry(
        id=doc.id,
        title=pick_title(metadata, body, doc.id),
        description=pick_description(metadata, project_body, settings.description_length),
        tags=pick_tags(metadata, body),
        link=pick_link(metadata) or extract_inline_link(body) or None,
        details_file=doc.file_name,
        date=pick_date(metadata, doc.mtime),
    )


def _read_all(directory: Path, settings: Settings) -> list[RawDocument]:
    docs = []
    for p in discover_files(directory, settings.template_name):
        try:
            docs.append(read_document(p))
        except OSError as e:
            raise RuntimeError(f"Failed to read {p}: {e}") from e
    return docs


def collect_posts(directory: Path, settings: Settings) -> list[BlogEntry]:
    return [build_post(doc, settings) for doc in _read_all(directory, settings)]


def collect_projects(directory: Path, settings: Settings) -> list[ProjectEntry]:
    return [build_project(doc, settings) for doc in _read_all(directory, settings)]

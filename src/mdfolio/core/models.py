"""Data models for source documents and generated manifest entries"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class RawDocument:
    """A markdown file as read from disk; not persisted."""
    id:        str          # file name without the .md extension
    file_name: str
    raw:       str          # full file content (includes frontmatter)
    mtime:     datetime     # last modification time, local


@dataclass(frozen=True)
class ParsedDocument:
    """Frontmatter split result: string metadata plus the remaining body."""
    metadata: dict[str, str] = field(default_factory=dict)
    body:     str = ""


class _Entry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Manifest form: camelCase keys, declared order, absent optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BlogEntry(_Entry):
    """One row of the posts manifest."""
    id:           str
    title:        str
    excerpt:      str
    date:         str                               # YYYY-MM-DD
    reading_time: int = Field(alias="readingTime", ge=1)
    details_file: str = Field(alias="detailsFile")


class ProjectEntry(_Entry):
    """One row of the projects manifest."""
    id:           str
    title:        str
    description:  str
    tags:         list[str] = []
    link:         Optional[str] = None
    details_file: str = Field(alias="detailsFile")
    date:         str                               # YYYY-MM-DD

"""Manifest output: deterministic ordering and pretty-printed JSON files"""

import json
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Sequence, TypeVar

from mdfolio.core.models import BlogEntry, ProjectEntry


Entry = TypeVar('Entry', BlogEntry, ProjectEntry)


def date_timestamp(value: str) -> float:
    """UTC midnight timestamp of a YYYY-MM-DD string; 0 when it does not parse."""
    try:
        d = date.fromisoformat(value)
    except (TypeError, ValueError):
        return 0.0
    return datetime.combine(d, time(), tzinfo=timezone.utc).timestamp()


def sort_entries(entries: Sequence[Entry]) -> list[Entry]:
    """Newest first; equal dates ordered by ascending id."""
    return sorted(entries, key=lambda e: (-date_timestamp(e.date), e.id))


def render_manifest(entries: Sequence[Entry]) -> str:
    """Serialize entries as 2-space indented JSON with a trailing newline."""
    payload = [e.to_json_dict() for e in entries]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_manifest(entries: Sequence[Entry], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_manifest(entries), encoding='utf-8')
    return path

"""Field heuristics: explicit frontmatter first, content-derived fallbacks second"""

import math
import re
from datetime import date, datetime, timedelta
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Optional

from mdfolio.core.parse import clean_value, normalize_newlines
from mdfolio.core.strip import normalize_line, strip_markdown


TITLE_HEADING = re.compile(r'^#{1,6}\s+(.+)\s*$', re.MULTILINE)
TRAILING_HASHES = re.compile(r'\s+#+$')
TAG_SPLIT = re.compile(r'[,，|]')
INLINE_TAGS = re.compile(r'^(?:项目关键词|关键词|Tags?|Tag)\s*[:：]\s*(.+)$', re.IGNORECASE)
MD_HTTP_LINK = re.compile(r'\[[^\]]+]\((https?://[^)]+)\)', re.IGNORECASE)
BARE_URL = re.compile(r'https?://\S+', re.IGNORECASE)
ISO_DATE = re.compile(r'^([0-9]{4})[-/]([0-9]{1,2})[-/]([0-9]{1,2})')
CN_DATE = re.compile(r'^([0-9]{4})\s*年\s*([0-9]{1,2})\s*月\s*([0-9]{1,2})\s*日')
LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')
CJK_CHAR = re.compile(r'[\u4e00-\u9fff]')

DESCRIPTION_KEYS = ('description', 'summary', 'excerpt')
LINK_KEYS = ('link', 'url', 'repo')


def first_of(*attempts: Callable[[], Any], default: Any = None) -> Any:
    """Evaluate attempts in order and return the first non-empty result."""
    for attempt in attempts:
        result = attempt()
        if result:
            return result
    return default


def _meta(metadata: dict[str, str], *keys: str) -> str:
    """Return the first non-empty metadata value among keys, else ''."""
    return first_of(*(lambda k=k: metadata.get(k, '') for k in keys), default='')


# --- title ---

def heading_title(body: str) -> str:
    m = TITLE_HEADING.search(body)
    return TRAILING_HASHES.sub('', m.group(1).strip()) if m else ''


def pick_title(metadata: dict[str, str], body: str, fallback: str) -> str:
    return first_of(
        lambda: metadata.get('title'),
        lambda: heading_title(body),
        default=fallback,
    )


# --- tags ---

def parse_tags(value: Optional[str]) -> list[str]:
    """Parse `[a, b]` or `a, b | c` into a list of cleaned, non-empty tags."""
    raw = str(value).strip() if value else ''
    if not raw:
        return []
    if raw.startswith('[') and raw.endswith(']'):
        parts = raw[1:-1].split(',')
    else:
        parts = TAG_SPLIT.split(raw)
    return [t for t in (clean_value(p) for p in parts) if t]


def extract_inline_tags(body: str) -> list[str]:
    """Tags from the first `Tags: ...` / `关键词：...` line of body."""
    for line in normalize_newlines(body).split('\n'):
        m = INLINE_TAGS.match(normalize_line(line))
        if m:
            return parse_tags(m.group(1))
    return []


def pick_tags(metadata: dict[str, str], body: str) -> list[str]:
    return first_of(
        lambda: parse_tags(_meta(metadata, 'tags', 'tag')),
        lambda: extract_inline_tags(body),
        default=[],
    )


# --- link ---

def pick_link(metadata: dict[str, str]) -> str:
    return _meta(metadata, *LINK_KEYS)


def extract_inline_link(body: str) -> str:
    """First http(s) markdown link target, else first bare URL, scanning line by line."""
    for line in normalize_newlines(body).split('\n'):
        cleaned = normalize_line(line)
        m = MD_HTTP_LINK.search(cleaned)
        if m:
            return m.group(1).strip()
        m = BARE_URL.search(cleaned)
        if m:
            return m.group(0).rstrip('),.')
    return ''


# --- date ---

def _ymd(m: Optional[re.Match]) -> Optional[date]:
    """Build a date from year/month/day groups, rolling out-of-range months and days over."""
    if not m:
        return None
    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    try:
        return date(year + (month - 1) // 12, (month - 1) % 12 + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _generic_date(value: str) -> Optional[date]:
    """Best-effort parse of ISO 8601 or RFC 2822 strings; aware values are shifted to local time."""
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError, OverflowError):
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def parse_date_string(value: Optional[str]) -> Optional[date]:
    """Parse `YYYY-M-D`, `YYYY/M/D`, `YYYY年M月D日`, then generic formats; None if all fail."""
    if not value:
        return None
    trimmed = value.strip()
    return first_of(
        lambda: _ymd(ISO_DATE.match(trimmed)),
        lambda: _ymd(CN_DATE.match(trimmed)),
        lambda: _generic_date(trimmed),
    )


def format_date(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def pick_date(metadata: dict[str, str], mtime: datetime) -> str:
    return format_date(parse_date_string(metadata.get('date')) or mtime.date())


# --- reading time ---

def parse_reading_time(value: Optional[str]) -> Optional[int]:
    """Leading integer of value, or None when missing, unparseable, or below 1."""
    if not value:
        return None
    m = LEADING_INT.match(str(value))
    if not m:
        return None
    minutes = int(m.group(1))
    return minutes if minutes >= 1 else None


def get_reading_time(plain_text: str, words_per_minute: int = 200) -> int:
    """Minutes to read: CJK characters and other words each count as one unit."""
    if not plain_text:
        return 1
    cjk_count = len(CJK_CHAR.findall(plain_text))
    word_count = len(CJK_CHAR.sub(' ', plain_text).split())
    return max(1, math.ceil((cjk_count + word_count) / words_per_minute))


# --- excerpt / description ---

def generate_excerpt(plain_text: str, length: int) -> str:
    if not plain_text:
        return ''
    return f"{plain_text[:length]}..." if len(plain_text) > length else plain_text


def pick_excerpt(metadata: dict[str, str], plain_text: str, length: int = 150) -> str:
    excerpt = metadata.get('excerpt')
    if excerpt:
        return excerpt.strip()
    return generate_excerpt(plain_text, length)


def pick_description(metadata: dict[str, str], project_body: str, length: int = 160) -> str:
    direct = _meta(metadata, *DESCRIPTION_KEYS)
    if direct:
        return direct.strip()
    return generate_excerpt(strip_markdown(project_body), length)

"""Decode heterogeneous article fields into canonical display values.

The Público API returns the same logical field in different shapes depending
on the endpoint and the record: authors may be a string, an object or a list,
tags may be strings or tag objects, and so on. Each field gets one decoder
that classifies the value with ``classify`` and handles every shape. Malformed
values never raise; they resolve to the caller's fallback.
"""

import logging
from datetime import datetime, timezone
from enum import Enum

from models import ArticleIcon
from sanitize import strip_tags

logger = logging.getLogger("publico.normalize")

AUTHOR_NAME_KEYS = ("nome", "name")
TAG_TEXT_KEYS = ("nome", "name", "value", "titulo", "title")
IMAGE_SOURCE_KEY = "src"

# Stringified placeholders that leak out of upstream serializers.
INVALID_TAGS = {"undefined", "null", "none", "[object object]"}

PT_MONTHS = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]


class FieldShape(Enum):
    ABSENT = "absent"
    SCALAR = "scalar"
    OBJECT = "object"
    COLLECTION = "collection"


def classify(value) -> FieldShape:
    """Tag a raw JSON value with its shape. Blank strings count as absent."""
    if value is None or isinstance(value, bool):
        return FieldShape.ABSENT
    if isinstance(value, str):
        return FieldShape.SCALAR if value.strip() else FieldShape.ABSENT
    if isinstance(value, (int, float)):
        return FieldShape.SCALAR
    if isinstance(value, dict):
        return FieldShape.OBJECT
    if isinstance(value, (list, tuple)):
        return FieldShape.COLLECTION
    return FieldShape.ABSENT


def _first_text(obj: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = obj.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


# --- Authors ---

def _author_name(entry) -> str | None:
    if isinstance(entry, str):
        return entry.strip() or None
    if isinstance(entry, dict):
        return _first_text(entry, AUTHOR_NAME_KEYS)
    return None


def format_authors(value, fallback: str, separator: str = ", ") -> str:
    """Join resolvable author names in source order, or return ``fallback``."""
    shape = classify(value)
    if shape is FieldShape.COLLECTION:
        entries = list(value)
    elif shape in (FieldShape.SCALAR, FieldShape.OBJECT):
        entries = [value]
    else:
        entries = []

    names = []
    for entry in entries:
        name = _author_name(entry)
        if name:
            names.append(name)
        else:
            logger.debug("Dropping unresolvable author entry %r", entry)

    return separator.join(names) if names else fallback


# --- Tags ---

def _tag_text(tag) -> str | None:
    if isinstance(tag, bool) or tag is None:
        return None
    if isinstance(tag, str):
        text = tag.strip()
    elif isinstance(tag, (int, float)):
        text = str(tag)
    elif isinstance(tag, dict):
        text = _first_text(tag, TAG_TEXT_KEYS)
    else:
        return None

    if not text or text.lower() in INVALID_TAGS:
        return None
    return text


def extract_tags(value, limit: int) -> list[str]:
    """Resolve tags to text, drop unusable entries and keep the first ``limit``."""
    shape = classify(value)
    if shape is FieldShape.COLLECTION:
        entries = list(value)
    elif shape in (FieldShape.SCALAR, FieldShape.OBJECT):
        entries = [value]
    else:
        return []

    tags = [text for text in (_tag_text(entry) for entry in entries) if text]
    if len(tags) > limit:
        logger.debug("Capping %d tags to %d", len(tags), limit)
    return tags[:limit]


# --- Image / icon ---

def _image_source(value) -> str | None:
    if classify(value) is FieldShape.OBJECT:
        src = value.get(IMAGE_SOURCE_KEY)
        if isinstance(src, str) and src.strip():
            return src.strip()
    return None


def article_icon(raw: dict, title, accent_color: str, placeholder: str) -> ArticleIcon:
    """Check the image fields in priority order, else build a letter badge."""
    media = raw.get("multimediaPrincipal")
    if isinstance(media, str) and media.strip():
        return ArticleIcon(source=media.strip())

    source = _image_source(media) or _image_source(raw.get("imagem"))
    if source:
        return ArticleIcon(source=source)

    clean_title = strip_tags(title).strip()
    letter = clean_title[:1].upper()[:1] if clean_title else placeholder
    return ArticleIcon(text=letter, tint_color=accent_color)


# --- Dates ---

def parse_date(value) -> datetime | None:
    """Parse an ISO string or epoch number (seconds or milliseconds)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            ts = value / 1000 if abs(value) > 1e11 else value
            return datetime.fromtimestamp(ts, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return parse_date(int(text))
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def format_date(value) -> str | None:
    """Format a date the pt-PT way, e.g. ``10 de maio de 2024, 14:30``."""
    dt = parse_date(value)
    if dt is None:
        return None
    month = PT_MONTHS[dt.month - 1]
    return f"{dt.day} de {month} de {dt.year}, {dt.strftime('%H:%M')}"


def published_label(raw: dict, fallback: str, zero_date: str) -> str:
    """Label for ``data`` (or ``time`` when ``data`` is absent)."""
    value = raw.get("data")
    if classify(value) is FieldShape.ABSENT:
        value = raw.get("time")
    if classify(value) is FieldShape.ABSENT:
        return fallback

    if isinstance(value, str) and zero_date in value:
        return fallback

    formatted = format_date(value)
    if not formatted:
        logger.debug("Unparsable publication date %r", value)
        return fallback
    return formatted


# --- Title ---

def resolve_title(raw: dict, untitled: str, fallback_title: str | None = None) -> str:
    """Markup-stripped title, else the caller's title, else ``untitled``."""
    title = strip_tags(raw.get("titulo")).strip()
    if title:
        return title
    if isinstance(fallback_title, str) and fallback_title.strip():
        return fallback_title.strip()
    return untitled

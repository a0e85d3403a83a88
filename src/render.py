"""Build presentation-ready articles and the payloads the list/detail views consume."""

import hashlib
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from article_id import extract_article_id
from models import NormalizedArticle
from normalize import (
    article_icon,
    extract_tags,
    format_authors,
    published_label,
    resolve_title,
)
from sanitize import clean_description, strip_tags
from urls import canonical_url

logger = logging.getLogger("publico.render")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PROJECT_ROOT / "templates"

OPEN_ACTION_TITLE = "Open in Browser"
COPY_ACTION_TITLE = "Copy URL"
TAG_ICON = "tag"


def _render(template_name: str, **context) -> str:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
    )
    return env.get_template(template_name).render(**context).strip() + "\n"


def error_markdown(message: str) -> str:
    return _render("error.md.j2", message=message)


def loading_markdown(title: str) -> str:
    return _render("loading.md.j2", title=title)


def body_markdown(raw: dict, url: str, display: dict) -> str:
    """Sanitized body text, or the read-on-the-web notice linking to ``url``."""
    body = strip_tags(raw.get("body")).strip()
    if body:
        return body
    logger.debug("No body text, linking to %s", url)
    return _render(
        "read_on_web.md.j2",
        notice=display["read_on_web"],
        open_label=display["open_label"],
        url=url,
    ).strip()


def article_key(url: str) -> str:
    """Stable row key: the article ID, else a short hash of the URL."""
    return extract_article_id(url) or hashlib.sha256(url.encode()).hexdigest()[:16]


def build_article(raw: dict, settings: dict, fallback_title: str | None = None) -> NormalizedArticle:
    """Normalize one raw API record into a NormalizedArticle.

    Never raises on malformed fields; every label resolves to a fallback.
    """
    provider = settings["provider"]
    display = settings["display"]
    not_available = display["not_available"]

    title = resolve_title(raw, display["untitled"], fallback_title)
    url = canonical_url(raw, provider["domain"], provider["homepage"])
    author = format_authors(raw.get("autores"), not_available, display["author_separator"])
    published = published_label(raw, not_available, display["zero_date"])
    tags = extract_tags(raw.get("tags"), display["max_tags"])
    icon = article_icon(raw, raw.get("titulo"), display["icon_color"], display["placeholder_letter"])
    lead = strip_tags(raw.get("lead")).strip()
    description = clean_description(strip_tags(raw.get("descricao")).strip())
    body = body_markdown(raw, url, display)

    preview = _render("preview.md.j2", title=title, description=description)
    detail = _render(
        "article.md.j2",
        title=title,
        author=author,
        published=published,
        lead=lead,
        body=body,
    )

    return NormalizedArticle(
        id=article_key(url),
        title=title,
        author_label=author,
        published_label=published,
        icon=icon,
        url=url,
        body_markdown=body,
        preview_markdown=preview,
        detail_markdown=detail,
        lead=lead,
        description=description,
        tags=tuple(tags),
    )


def tag_color(index: int, palette: list[str]) -> str:
    """Deterministic per-position tag color from a cyclic palette."""
    return palette[index % len(palette)]


def metadata_rows(article: NormalizedArticle, settings: dict) -> list[dict]:
    """Key/value rows for the detail side panel."""
    display = settings["display"]
    rows = [
        {"type": "label", "title": "Author", "text": article.author_label},
        {"type": "label", "title": "Published", "text": article.published_label},
    ]

    if article.tags:
        rows.append({
            "type": "tag_list",
            "title": display["keywords_label"],
            "tags": [
                {"text": tag, "color": tag_color(i, display["tag_palette"])}
                for i, tag in enumerate(article.tags)
            ],
        })
    else:
        rows.append({
            "type": "label",
            "title": display["tags_label"],
            "text": display["not_available"],
            "icon": TAG_ICON,
        })
    return rows


def actions(url: str) -> list[dict]:
    return [
        {"type": "open_in_browser", "title": OPEN_ACTION_TITLE, "url": url},
        {"type": "copy_to_clipboard", "title": COPY_ACTION_TITLE, "content": url},
    ]


def list_item(article: NormalizedArticle, settings: dict) -> dict:
    """Row payload for the feed list, with its preview pane."""
    return {
        "key": f"article-{article.id}",
        "title": article.title,
        "icon": article.icon.to_dict(),
        "detail": {
            "markdown": article.preview_markdown,
            "metadata": metadata_rows(article, settings),
        },
        "actions": actions(article.url),
    }

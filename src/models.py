"""Presentation-ready article records handed to the rendering collaborator."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArticleIcon:
    """Either an image URL or a single-letter badge, never both."""

    source: str | None = None
    text: str | None = None
    tint_color: str | None = None

    def __post_init__(self):
        if bool(self.source) == bool(self.text):
            raise ValueError("ArticleIcon needs exactly one of source or text")
        if self.text and not self.tint_color:
            raise ValueError("Letter icons need a tint color")

    def to_dict(self) -> dict:
        if self.source:
            return {"source": self.source}
        return {"text": self.text, "tintColor": self.tint_color}


@dataclass(frozen=True)
class NormalizedArticle:
    id: str
    title: str
    author_label: str
    published_label: str
    icon: ArticleIcon
    url: str
    body_markdown: str
    preview_markdown: str
    detail_markdown: str
    lead: str = ""
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author_label,
            "published": self.published_label,
            "tags": list(self.tags),
            "icon": self.icon.to_dict(),
            "url": self.url,
            "lead": self.lead,
            "description": self.description,
            "body_markdown": self.body_markdown,
        }

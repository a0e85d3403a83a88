"""Feed and article-detail flows driving the list and detail views."""

import logging
from dataclasses import dataclass, field

from article_id import extract_article_id
from fetchers.publico import FetchError, fetch_article_detail, fetch_top_news
from models import NormalizedArticle
from render import actions, build_article, error_markdown, list_item, loading_markdown

logger = logging.getLogger("publico.views")

MISSING_ID_MESSAGE = "Could not extract article ID from URL"


@dataclass
class FeedResult:
    articles: list[NormalizedArticle] = field(default_factory=list)
    error: str | None = None

    def items(self, settings: dict) -> list[dict]:
        return [list_item(article, settings) for article in self.articles]


def load_feed(settings: dict, fetch=fetch_top_news) -> FeedResult:
    """Fetch the top-news list and normalize each record.

    A fetch failure yields an empty feed carrying the error message.
    """
    try:
        records = fetch(settings)
    except FetchError as e:
        logger.error("Error fetching top news: %s", e)
        return FeedResult(error=str(e))

    articles = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping non-object record at index %d", index)
            continue
        articles.append(build_article(record, settings))

    logger.info("Normalized %d of %d records", len(articles), len(records))
    return FeedResult(articles=articles)


class ArticleView:
    """Detail view state for one article link.

    ``load`` may be called again; the most recent call's outcome wins.
    """

    def __init__(self, article_url: str, article_title: str, settings: dict,
                 fetch=fetch_article_detail):
        self.article_url = article_url
        self.article_title = article_title
        self.settings = settings
        self._fetch = fetch
        self.is_loading = True
        self.article: NormalizedArticle | None = None
        self.error: str | None = None

    def load(self) -> None:
        self.is_loading = True
        self.article = None
        self.error = None
        try:
            article_id = extract_article_id(self.article_url)
            if not article_id:
                logger.warning("No article ID in %r", self.article_url)
                self.error = MISSING_ID_MESSAGE
                return

            data = self._fetch(article_id, self.settings)
            self.article = build_article(data, self.settings, fallback_title=self.article_title)
        except FetchError as e:
            self.error = f"Error loading article: {e}"
        finally:
            self.is_loading = False

    @property
    def markdown(self) -> str:
        if self.error:
            return error_markdown(self.error)
        if not self.article:
            return loading_markdown(self.article_title)
        return self.article.detail_markdown

    def payload(self) -> dict:
        """Detail payload for the rendering collaborator."""
        return {
            "markdown": self.markdown,
            "is_loading": self.is_loading,
            "navigation_title": self.article_title,
            "actions": actions(self.article_url),
        }

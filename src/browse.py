#!/usr/bin/env python3
"""Main entry point — print the Público feed or a single article."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from config import load_settings
from views import ArticleView, load_feed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("publico.browse")


def show_feed(settings: dict, as_json: bool = False) -> int:
    feed = load_feed(settings)
    if feed.error:
        print(f"Error fetching top news: {feed.error}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(feed.items(settings), indent=2, ensure_ascii=False))
        return 0

    for article in feed.articles:
        tags = ", ".join(article.tags) or settings["display"]["not_available"]
        print(f"{article.title}")
        print(f"  {article.author_label} • {article.published_label}")
        print(f"  {settings['display']['tags_label']}: {tags}")
        print(f"  {article.url}")
        print()
    print(f"{len(feed.articles)} articles")
    return 0


def show_article(settings: dict, url: str, title: str, as_json: bool = False) -> int:
    view = ArticleView(url, title, settings)
    view.load()

    if as_json:
        print(json.dumps(view.payload(), indent=2, ensure_ascii=False))
    else:
        print(view.markdown)
    return 1 if view.error else 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Browse Público news")
    parser.add_argument("--settings", help="Path to a settings YAML file")
    parser.add_argument("--json", action="store_true", help="Print view payloads as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("feed", help="Show the latest news feed")

    article = sub.add_parser("article", help="Show a single article")
    article.add_argument("url", help="Article URL")
    article.add_argument("--title", default="", help="Title shown while loading or as fallback")

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except Exception as e:
        logger.error("Failed to load settings: %s", e)
        sys.exit(1)

    if args.command == "feed":
        status = show_feed(settings, as_json=args.json)
    else:
        status = show_article(settings, args.url, args.title, as_json=args.json)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()

"""Público JSON API client. Returns raw, untrusted article records."""

import logging

import requests

logger = logging.getLogger("publico.fetchers.publico")

LIST_KEYS = ("items", "artigos")


class FetchError(Exception):
    """A list or detail request failed; the message is shown to the user."""


def _get_json(url: str, api: dict):
    try:
        resp = requests.get(
            url,
            timeout=api.get("timeout", 15),
            headers={"User-Agent": api.get("user_agent", "PublicoNewsFeed/1.0")},
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise FetchError(f"Request failed: {e}") from e

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", url, e)
        raise FetchError(f"Invalid JSON response from {url}") from e


def fetch_top_news(settings: dict) -> list[dict]:
    """Fetch the latest-news list.

    Accepts a bare JSON list or an object wrapping it under ``items``/``artigos``.
    """
    api = settings["api"]
    data = _get_json(api["list_url"], api)

    if isinstance(data, dict):
        for key in LIST_KEYS:
            if isinstance(data.get(key), list):
                data = data[key]
                break

    if not isinstance(data, list):
        raise FetchError("Unexpected response: expected a list of articles")

    logger.info("Fetched %d articles from %s", len(data), api["list_url"])
    return data


def fetch_article_detail(article_id: str, settings: dict) -> dict:
    """Fetch a single article record by its numeric ID."""
    if not article_id:
        raise FetchError("Missing article ID")

    api = settings["api"]
    url = api["detail_url"].format(article_id=article_id)
    data = _get_json(url, api)

    if not isinstance(data, dict):
        raise FetchError(f"Unexpected response for article {article_id}")
    return data

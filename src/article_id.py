"""Derive the article identifier from a Público article URL."""

import re
from urllib.parse import urlparse

PROVIDER_HOST = "publico.pt"
PROVIDER_DOMAIN = "https://www.publico.pt"

# Article paths end in "<slug>-<digits>" or a bare numeric segment.
ARTICLE_SEGMENT_RE = re.compile(r"(?:^|-)(\d+)$")


def extract_article_id(url) -> str | None:
    """Return the numeric article ID, or None if the URL is not an article link."""
    if not isinstance(url, str) or not url.strip():
        return None

    url = url.strip()
    if url.startswith("/") and not url.startswith("//"):
        url = PROVIDER_DOMAIN + url

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    host = (parsed.hostname or "").lower()
    if host != PROVIDER_HOST and not host.endswith("." + PROVIDER_HOST):
        return None

    segments = [s for s in parsed.path.split("/") if s]
    if not segments:
        return None

    match = ARTICLE_SEGMENT_RE.search(segments[-1])
    if not match:
        return None
    return match.group(1)

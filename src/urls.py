"""Repair provider URL fields into a single absolute URL."""

import logging

logger = logging.getLogger("publico.urls")

# Ordered (needle, replacement) repairs for known upstream defects.
URL_REPAIRS = [
    ("https://www.publico.pthttps//", "https://"),
    ("https://www.publico.pthttps/", "https://"),
    ("https//", "https://"),
]


def repair_url(url: str, rules: list[tuple[str, str]] = URL_REPAIRS) -> str:
    """Apply each substitution rule in order."""
    for needle, replacement in rules:
        if needle in url:
            url = url.replace(needle, replacement)
    return url


def absolutize(url: str, domain: str) -> str:
    """Qualify a repaired URL so it always carries a scheme and host."""
    host = domain.split("://", 1)[-1]
    bare_host = host[4:] if host.startswith("www.") else host

    if url.startswith("http"):
        return url
    if bare_host in url:
        return "https://" + url.lstrip("/")
    separator = "" if url.startswith("/") else "/"
    return f"{domain}{separator}{url}"


def canonical_url(raw: dict, domain: str, homepage: str) -> str:
    """Pick and repair the article URL.

    ``fullUrl`` wins when present; otherwise ``url`` is repaired. Either is
    qualified against ``domain``. Falls back to ``homepage``.
    """
    full_url = raw.get("fullUrl")
    if isinstance(full_url, str) and full_url.strip():
        return absolutize(full_url.strip(), domain)

    url = raw.get("url")
    if isinstance(url, str) and url.strip():
        return absolutize(repair_url(url.strip()), domain)

    logger.debug("No usable URL field, using homepage")
    return homepage

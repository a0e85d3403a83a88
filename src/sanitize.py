"""Strip markup and provider noise from free text."""

import re

TAG_RE = re.compile(r"<[^>]*>")

# "há 3 horas ..." lead-ins on list descriptions. The accented letter can
# arrive mis-decoded as "hÃ¡", so both spellings stay supported.
NOISE_PREFIXES = [
    re.compile(
        r"^(há|hÃ¡)\s+\d+\s+(horas?|dias?|semanas?|meses?)(?:\s*\.{3}|\s+\.\.\.|…)\s*",
        re.IGNORECASE,
    ),
    re.compile(
        r"^h[aá]\s+\d+\s+(?:horas?|dias?|semanas?|meses?)(?:\s*\.{3}|\s+\.\.\.|…)\s*",
        re.IGNORECASE,
    ),
]


def strip_tags(text) -> str:
    """Remove embedded markup tags. Non-string input yields an empty string."""
    if not isinstance(text, str):
        return ""
    return TAG_RE.sub("", text)


def clean_description(text) -> str:
    """Drop the first matching relative-time prefix from a short description."""
    if not isinstance(text, str) or not text:
        return ""

    for pattern in NOISE_PREFIXES:
        match = pattern.match(text)
        if match:
            return text[match.end():]
    return text

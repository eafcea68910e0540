"""Regex pattern chains for pulling link-preview fields out of raw HTML.

Each chain is tried in order and the first pattern with a match wins; results
are never merged across patterns.
"""

import html
import logging
import re
from collections.abc import Iterable
from urllib.parse import urljoin

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)

DESCRIPTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r'<meta[^>]*name="description"[^>]*content="([^"]*)"[^>]*>', re.IGNORECASE
    ),
    re.compile(
        r'<meta[^>]*property="og:description"[^>]*content="([^"]*)"[^>]*>',
        re.IGNORECASE,
    ),
)

OG_IMAGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r'<meta[^>]*property="og:image"[^>]*content="([^"]*)"[^>]*>', re.IGNORECASE
    ),
    re.compile(
        r'<meta[^>]*name="og:image"[^>]*content="([^"]*)"[^>]*>', re.IGNORECASE
    ),
    re.compile(
        r'<meta[^>]*property="og:image:secure_url"[^>]*content="([^"]*)"[^>]*>',
        re.IGNORECASE,
    ),
    re.compile(
        r'<meta[^>]*property="twitter:image"[^>]*content="([^"]*)"[^>]*>', re.IGNORECASE
    ),
)

FAVICON_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r'<link[^>]*rel="(?:shortcut )?icon"[^>]*href="([^"]*)"[^>]*>', re.IGNORECASE
    ),
    re.compile(
        r'<link[^>]*rel="apple-touch-icon"[^>]*href="([^"]*)"[^>]*>', re.IGNORECASE
    ),
    re.compile(
        r'<link[^>]*rel="icon"[^>]*href="([^"]*)"[^>]*>', re.IGNORECASE
    ),
)


def first_match(patterns: Iterable[re.Pattern[str]], document: str) -> str:
    """Return the trimmed first group of the first pattern that matches, or ``""``."""
    for pattern in patterns:
        match = pattern.search(document)
        if match:
            return match.group(1).strip()
    return ""


def decode_entities(text: str) -> str:
    """Decode HTML character references (``&amp;``, ``&#39;``, ...)."""
    if not text:
        return ""
    return html.unescape(text)


def extract_title(document: str) -> str:
    return first_match((TITLE_PATTERN,), document)


def extract_description(document: str) -> str:
    return first_match(DESCRIPTION_PATTERNS, document)


def extract_og_image(document: str) -> str:
    return first_match(OG_IMAGE_PATTERNS, document)


def extract_favicon(document: str) -> str:
    return first_match(FAVICON_PATTERNS, document)


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url``.

    Protocol-relative references are pinned to https first. If resolution
    fails the raw reference is returned unchanged.
    """
    if not reference:
        return ""
    if reference.startswith("//"):
        reference = "https:" + reference
    try:
        return urljoin(base_url, reference)
    except ValueError as exc:
        logger.error("Error resolving URL %r against %r: %s", reference, base_url, exc)
        return reference

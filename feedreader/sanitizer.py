"""Markup stripping, image discovery and text shaping for feed items."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence

_TAG_RE = re.compile(r"<[^>]*>")
_IMAGE_EXT_RE = re.compile(r"\.(jpg|jpeg|png|gif|webp)", re.IGNORECASE)

# Probed in order against the item's content followed by its description.
_MARKUP_PROBES: Sequence[Pattern[str]] = (
    re.compile(r"<img[^>]+src=[\"']([^\"'>]+)[\"']", re.IGNORECASE),
    re.compile(r"<media:content[^>]+url=[\"']([^\"'>]+)[\"']", re.IGNORECASE),
    re.compile(
        r"<enclosure(?=[^>]*type=[\"']image/)[^>]*url=[\"']([^\"'>]+)[\"']",
        re.IGNORECASE,
    ),
    re.compile(
        r"url=[\"']([^\"'>]+\.(?:jpg|jpeg|png|gif|webp)[^\"'>]*)[\"']",
        re.IGNORECASE,
    ),
)
_BARE_URL_RE = re.compile(
    r"https?://[^\s\"'<>]+?\.(?:jpg|jpeg|png|gif|webp)(?:\?[^\s\"'<>]*)?",
    re.IGNORECASE,
)

ELLIPSIS = "..."


def sanitize(html: str) -> str:
    """Remove every ``<...>`` span and trim surrounding whitespace.

    Entities are left encoded and malformed markup is not repaired.
    """

    if not html:
        return ""
    return _TAG_RE.sub("", html).strip()


def _is_http(url: str) -> bool:
    return url.lower().startswith("http")


def _looks_like_image(url: str) -> bool:
    return _is_http(url) and _IMAGE_EXT_RE.search(url) is not None


def extract_image(
    content: str,
    description: str,
    thumbnail: str = "",
    enclosure_thumbnail: str = "",
) -> Optional[str]:
    """Return the first image URL found for an item, or ``None``.

    Explicit thumbnail fields win over anything found in the markup.
    """

    for candidate in (thumbnail, enclosure_thumbnail):
        candidate = (candidate or "").strip()
        if candidate and _is_http(candidate):
            return candidate

    haystack = (content or "") + (description or "")
    if not haystack:
        return None

    for probe in _MARKUP_PROBES:
        for match in probe.finditer(haystack):
            url = match.group(1).strip()
            if _looks_like_image(url):
                return url

    match = _BARE_URL_RE.search(haystack)
    if match:
        return match.group(0)
    return None


def summarize(text: str, max_chars: int = 200) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + ELLIPSIS
    return text


def backfill_content(content: str, description: str, min_chars: int = 500) -> str:
    """Return ``content`` if long enough, else the description repeated thrice.

    The repeated text is a stopgap for thin feeds; callers can rely on the
    length but not on the content being free of repetition.
    """

    if len(content) >= min_chars:
        return content
    return description * 3


__all__ = ["ELLIPSIS", "backfill_content", "extract_image", "sanitize", "summarize"]
